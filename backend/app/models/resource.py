"""Resource ORM — opaque handle held by a space.

Invariants:
    - Always belongs to a Space (space_id FK, cascade on delete)
    - Contents are irrelevant to deletion rules; only the count matters
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Resource(Base):
    """Resource entity — a handle stored inside a space."""
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    space_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
    )
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    space: Mapped["Space"] = relationship(
        "Space", back_populates="resources",
    )
