"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves;
      the shell orchestrates the async calls around the pure logic
    - SpaceStore is the minimal capability set the deletion workflow needs;
      richer adapters (SqlSpaceStore) satisfy it structurally
"""

from typing import Protocol

from app.core.domain_types import SpaceId
from app.core.space import Space


class SpaceStore(Protocol):
    """Contract for space persistence — implemented by shell."""
    async def fetch_by_id(self, space_id: SpaceId) -> Space | None: ...
    async def remove_by_id(self, space_id: SpaceId) -> None: ...
