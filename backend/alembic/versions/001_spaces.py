"""Initial schema — spaces and their resources.

Revision ID: 001_spaces
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_spaces"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "spaces",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_spaces"),
    )
    op.create_index("ix_spaces_owner_id", "spaces", ["owner_id"])
    op.create_index(
        "uq_spaces_owner_default", "spaces", ["owner_id"], unique=True,
        postgresql_where=sa.text("name = 'default'"),
        sqlite_where=sa.text("name = 'default'"),
    )

    op.create_table(
        "resources",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("space_id", sa.String(64), nullable=False),
        sa.Column("label", sa.String(200), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_resources"),
        sa.ForeignKeyConstraint(
            ["space_id"], ["spaces.id"],
            name="fk_resources_space_id_spaces", ondelete="CASCADE",
        ),
    )


def downgrade() -> None:
    op.drop_table("resources")
    op.drop_index("uq_spaces_owner_default", table_name="spaces")
    op.drop_index("ix_spaces_owner_id", table_name="spaces")
    op.drop_table("spaces")
