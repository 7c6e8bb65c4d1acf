"""Space ORM — persists the owned container that the deletion workflow guards.

Invariants:
    - id is an opaque string primary key, immutable once created
    - owner_id and name are non-nullable
    - At most one space named "default" per owner (partial unique index
      uq_spaces_owner_default)

Design Decisions:
    - String ids over UUID column: identifiers are opaque to the domain, any string
      a caller supplies must round-trip unchanged
    - cascade delete for resources: removing a space never leaves orphan rows
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Space(Base):
    """Space aggregate root — owns its resources."""
    __tablename__ = "spaces"
    __table_args__ = (
        Index("ix_spaces_owner_id", "owner_id"),
        Index(
            "uq_spaces_owner_default", "owner_id", unique=True,
            postgresql_where=text("name = 'default'"),
            sqlite_where=text("name = 'default'"),
        ),
    )

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    owner_id: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    resources: Mapped[list["Resource"]] = relationship(
        "Resource", back_populates="space",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Resource.created_at",
    )
