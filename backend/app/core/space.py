"""Space — immutable snapshot of a space as read from storage.

Invariants:
    - A Space is never mutated in-process; storage owns the record
    - resources only matters through its cardinality (is_empty)
    - Predicates are pure and read a single snapshot

Design Decisions:
    - frozen dataclass over ORM object: core stays free of SQLAlchemy imports
    - resources as tuple: ordered, hashable, cannot be appended to by callers
"""

from dataclasses import dataclass

from app.core.domain_types import DEFAULT_SPACE_NAME, SpaceId, UserId, ResourceId


@dataclass(frozen=True)
class Space:
    """Owned container of resources."""
    id: SpaceId
    owner_id: UserId
    name: str
    resources: tuple[ResourceId, ...] = ()

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id

    def is_empty(self) -> bool:
        return len(self.resources) == 0

    def is_the_default(self) -> bool:
        return self.name == DEFAULT_SPACE_NAME
