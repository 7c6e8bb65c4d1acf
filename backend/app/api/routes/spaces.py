"""Spaces — create, list, read, attach resources, and guarded deletion.

Invariants:
    - Acting user comes from the configured header (default X-User-Id); missing → 401
      in the same error envelope as every other failure
    - Every request builds its own SqlSpaceStore over its own DB session
    - DELETE delegates every rule to services.delete_space; the route only maps outcomes
    - Listing provisions the owner's default space so every owner has exactly one

Design Decisions:
    - Domain errors raised, not returned: the global SpacesError handler renders them
    - Store provided through a dependency so tests can override storage wholesale
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.domain_types import SpaceId, UserId
from app.core.errors import (
    ErrorContext, SpaceAccessDeniedError, SpaceNotFoundError, UnauthorizedError,
)
from app.core.space import Space
from app.infrastructure.database import get_db
from app.infrastructure.space_store import SqlSpaceStore
from app.schemas.space import (
    ResourceCreate, ResourceResponse, SpaceCreate, SpaceListResponse, SpaceResponse,
)
from app.services.delete_space import delete_space as delete_space_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/spaces", tags=["spaces"])


def get_acting_user(request: Request) -> UserId:
    """Read the acting user id from the configured request header."""
    header = get_settings().acting_user_header
    user_id = request.headers.get(header, "").strip()
    if not user_id:
        raise UnauthorizedError(header)
    return UserId(user_id)


def get_space_store(db: AsyncSession = Depends(get_db)) -> SqlSpaceStore:
    return SqlSpaceStore(db)


async def get_owned_space(
    store: SqlSpaceStore, space_id: SpaceId, acting_user: UserId,
) -> Space:
    """Get space or raise 404 / 403."""
    space = await store.fetch_by_id(space_id)
    context = ErrorContext(space_id=space_id, user_id=acting_user)
    if space is None:
        raise SpaceNotFoundError(space_id, context)
    if not space.is_owned_by(acting_user):
        raise SpaceAccessDeniedError(space_id, context)
    return space


@router.post(
    "", response_model=SpaceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_space(
    body: SpaceCreate,
    acting_user: UserId = Depends(get_acting_user),
    store: SqlSpaceStore = Depends(get_space_store),
):
    """Create a space owned by the acting user."""
    space = await store.create(acting_user, body.name)
    logger.info(
        f"Space '{space.name}' created",
        extra={"space_id": space.id, "user_id": acting_user},
    )
    return SpaceResponse.from_domain(space)


@router.get("", response_model=SpaceListResponse)
async def list_spaces(
    acting_user: UserId = Depends(get_acting_user),
    store: SqlSpaceStore = Depends(get_space_store),
):
    """List the acting user's spaces, default included."""
    await store.ensure_default(acting_user)
    spaces = await store.list_by_owner(acting_user)
    return SpaceListResponse(
        spaces=[SpaceResponse.from_domain(s) for s in spaces],
    )


@router.get("/{space_id}", response_model=SpaceResponse)
async def get_space(
    space_id: str,
    acting_user: UserId = Depends(get_acting_user),
    store: SqlSpaceStore = Depends(get_space_store),
):
    """Get space details."""
    space = await get_owned_space(store, SpaceId(space_id), acting_user)
    return SpaceResponse.from_domain(space)


@router.post(
    "/{space_id}/resources", response_model=ResourceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_resource(
    space_id: str,
    body: ResourceCreate,
    acting_user: UserId = Depends(get_acting_user),
    store: SqlSpaceStore = Depends(get_space_store),
):
    """Attach a resource to one of the acting user's spaces."""
    space = await get_owned_space(store, SpaceId(space_id), acting_user)
    resource_id = await store.add_resource(space.id, body.label)
    return ResourceResponse(id=resource_id, space_id=space.id, label=body.label)


@router.delete("/{space_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_space(
    space_id: str,
    acting_user: UserId = Depends(get_acting_user),
    store: SqlSpaceStore = Depends(get_space_store),
):
    """Delete an owned, empty, non-default space."""
    await delete_space_service(store, SpaceId(space_id), acting_user)
    logger.info(
        "Space deleted",
        extra={"space_id": space_id, "user_id": acting_user},
    )
