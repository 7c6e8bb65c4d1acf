"""Space Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - SpaceCreate.name: 1-100 chars, stripped, non-empty
    - ResourceCreate.label: 1-200 chars, stripped, non-empty
    - SpaceResponse exposes resource_count, never resource contents

Design Decisions:
    - field_validator for side-effect-free transforms (strip)
    - from_domain named constructor: routes never build responses field by field
"""

from pydantic import BaseModel, Field, field_validator

from app.core.space import Space


def _strip_non_empty(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("value cannot be empty or whitespace")
    return v


class SpaceCreate(BaseModel):
    """Space creation — validates name length and whitespace."""
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_non_empty(v)


class SpaceResponse(BaseModel):
    """Space response — public-facing space data."""
    id: str
    owner_id: str
    name: str
    resource_count: int
    is_default: bool

    @classmethod
    def from_domain(cls, space: Space) -> "SpaceResponse":
        return cls(
            id=space.id,
            owner_id=space.owner_id,
            name=space.name,
            resource_count=len(space.resources),
            is_default=space.is_the_default(),
        )


class SpaceListResponse(BaseModel):
    spaces: list[SpaceResponse]


class ResourceCreate(BaseModel):
    """Resource attachment — label is free text, contents are opaque."""
    label: str = Field(min_length=1, max_length=200)

    @field_validator("label")
    @classmethod
    def strip_label(cls, v: str) -> str:
        return _strip_non_empty(v)


class ResourceResponse(BaseModel):
    id: str
    space_id: str
    label: str
