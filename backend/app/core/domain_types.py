"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SpaceId, ResourceId, UserId wrap str; identifiers are opaque, never parsed
    - DEFAULT_SPACE_NAME is the single source of truth for the protected name
    - All deletion outcomes encoded as DeletionErrorKind, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: REST error envelope)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SpaceId = NewType("SpaceId", str)
ResourceId = NewType("ResourceId", str)
UserId = NewType("UserId", str)


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_SPACE_NAME: str = "default"


# ─── Enums ───────────────────────────────────────────────────────

class DeletionErrorKind(str, Enum):
    """Closed set of reasons a space deletion can fail. Compared by kind."""
    NOT_FOUND = "space_not_found"
    NOT_OWNED = "space_not_owned"
    NOT_EMPTY = "space_not_empty"
    PROTECTED_DEFAULT = "space_protected_default"
    REMOVAL_FAILED = "space_removal_failed"
