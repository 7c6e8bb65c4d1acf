"""SQL Space Store — SQLAlchemy adapter implementing the SpaceStore protocol.

Invariants:
    - fetch_by_id returns a core Space snapshot (never the ORM object) or None
    - remove_by_id deletes the space and its resources in one commit
    - remove_by_id raises DatabaseError when the row is already gone
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - At most one "default" space per owner; a lost insert race surfaces as
      SpaceConflictError, never as a second row

Design Decisions:
    - One store per AsyncSession: the route owns the session lifecycle, the store
      only issues statements against it
    - Shell-only operations (create, list_by_owner, ensure_default, add_resource)
      live here too; the deletion workflow only sees the two protocol methods
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import DEFAULT_SPACE_NAME, ResourceId, SpaceId, UserId
from app.core.errors import DatabaseError, SpaceConflictError, ErrorContext
from app.core.space import Space
from app.models.resource import Resource as ResourceModel
from app.models.space import Space as SpaceModel

logger = logging.getLogger(__name__)


def _to_domain(row: SpaceModel) -> Space:
    return Space(
        id=SpaceId(row.id),
        owner_id=UserId(row.owner_id),
        name=row.name,
        resources=tuple(ResourceId(r.id) for r in row.resources),
    )


def _default_conflict(owner_id: str) -> SpaceConflictError:
    return SpaceConflictError(
        f"Owner already has a '{DEFAULT_SPACE_NAME}' space",
        ErrorContext(user_id=owner_id),
    )


class SqlSpaceStore:
    """Space persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_row(self, space_id: str) -> SpaceModel | None:
        result = await self.db.execute(
            select(SpaceModel)
            .where(SpaceModel.id == space_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def fetch_by_id(self, space_id: SpaceId) -> Space | None:
        """Read one space snapshot, or None if absent."""
        try:
            row = await self._get_row(space_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch space {space_id}: {e}")
            raise DatabaseError("Could not read space", "select") from e
        return _to_domain(row) if row else None

    async def remove_by_id(self, space_id: SpaceId) -> None:
        """Delete space and cascade resources. Raises DatabaseError on failure."""
        try:
            row = await self._get_row(space_id)
            if row is None:
                raise DatabaseError(
                    f"space '{space_id}' no longer exists", "delete",
                    ErrorContext(space_id=space_id),
                )
            await self.db.delete(row)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to remove space {space_id}: {e}")
            raise DatabaseError("Could not remove space", "delete") from e

    async def list_by_owner(self, owner_id: UserId) -> list[Space]:
        """All spaces owned by owner_id, oldest first."""
        result = await self.db.execute(
            select(SpaceModel)
            .where(SpaceModel.owner_id == owner_id)
            .order_by(SpaceModel.created_at)
            .execution_options(populate_existing=True),
        )
        return [_to_domain(row) for row in result.scalars().all()]

    async def create(self, owner_id: UserId, name: str) -> Space:
        """Create a space. Rejects a second default space for the same owner."""
        if name == DEFAULT_SPACE_NAME and await self._find_default(owner_id):
            raise _default_conflict(owner_id)
        row = SpaceModel(owner_id=owner_id, name=name, resources=[])
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if name == DEFAULT_SPACE_NAME:
                # lost the race against a concurrent insert of the same default
                raise _default_conflict(owner_id) from e
            logger.error(f"Failed to create space for {owner_id}: {e}")
            raise DatabaseError("Integrity constraint violated", "insert") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to create space for {owner_id}: {e}")
            raise DatabaseError("Could not create space", "insert") from e
        await self.db.refresh(row)
        return _to_domain(row)

    async def ensure_default(self, owner_id: UserId) -> Space:
        """Return the owner's default space, creating it on first access."""
        row = await self._find_default(owner_id)
        if row is not None:
            return _to_domain(row)
        logger.info(
            "Provisioning default space",
            extra={"user_id": owner_id},
        )
        try:
            return await self.create(owner_id, DEFAULT_SPACE_NAME)
        except SpaceConflictError:
            row = await self._find_default(owner_id)
            if row is None:
                raise
            return _to_domain(row)

    async def add_resource(self, space_id: SpaceId, label: str) -> ResourceId:
        """Attach a resource to an existing space."""
        resource = ResourceModel(space_id=space_id, label=label)
        self.db.add(resource)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to add resource to space {space_id}: {e}")
            raise DatabaseError("Could not add resource", "insert") from e
        return ResourceId(resource.id)

    async def _find_default(self, owner_id: UserId) -> SpaceModel | None:
        result = await self.db.execute(
            select(SpaceModel)
            .where(SpaceModel.owner_id == owner_id)
            .where(SpaceModel.name == DEFAULT_SPACE_NAME)
            .execution_options(populate_existing=True),
        )
        return result.scalars().first()
