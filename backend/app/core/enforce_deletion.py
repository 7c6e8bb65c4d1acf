"""Deletion Enforcement — ordered guard chain deciding whether a space may be removed.

Invariants:
    - check_space_deletable is PURE: reads one snapshot, no IO, no mutation
    - Guards run in fixed order: existence, ownership, emptiness, default protection
    - First failing guard wins; later guards are never evaluated

Design Decisions:
    - Returns DeletionErrorKind | None instead of raising: the shell decides how to
      surface the failure
    - Fundamental checks before destructive-precondition checks (ADR: cheapest first)
"""

from app.core.domain_types import DeletionErrorKind
from app.core.space import Space


def check_space_deletable(
    space: Space | None, acting_user: str,
) -> DeletionErrorKind | None:
    """Return the first violated precondition, or None if deletion may proceed."""
    if space is None:
        return DeletionErrorKind.NOT_FOUND

    if not space.is_owned_by(acting_user):
        return DeletionErrorKind.NOT_OWNED

    if not space.is_empty():
        return DeletionErrorKind.NOT_EMPTY

    if space.is_the_default():
        return DeletionErrorKind.PROTECTED_DEFAULT

    return None
