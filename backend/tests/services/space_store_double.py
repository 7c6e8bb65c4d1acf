"""Space Store Double — in-memory SpaceStore that records every call.

Invariants:
    - Satisfies the SpaceStore protocol structurally (fetch_by_id, remove_by_id)
    - Every instance owns its own dict; nothing shared between tests
    - fetch_calls / remove_calls record ids in call order
    - remove_error, when set, is raised by remove_by_id and the record is kept

Design Decisions:
    - Hand-written double over unittest.mock: the call log doubles as the assertion
      surface and the seeded dict keeps "not found" explicit
    - mutate_on_remove=False gives a non-mutating store for repeat-call checks
"""

from app.core.space import Space


class SpaceStoreDouble:
    """Recording, seedable in-memory store."""

    def __init__(self, *spaces: Space, mutate_on_remove: bool = True):
        self.spaces: dict[str, Space] = {s.id: s for s in spaces}
        self.mutate_on_remove = mutate_on_remove
        self.remove_error: Exception | None = None
        self.fetch_calls: list[str] = []
        self.remove_calls: list[str] = []

    async def fetch_by_id(self, space_id):
        self.fetch_calls.append(space_id)
        return self.spaces.get(space_id)

    async def remove_by_id(self, space_id):
        self.remove_calls.append(space_id)
        if self.remove_error is not None:
            raise self.remove_error
        if self.mutate_on_remove:
            self.spaces.pop(space_id, None)
