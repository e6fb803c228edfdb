"""Create users and chilaquiles tables with soft-delete flags.

Revision ID: 20251019000000
Revises:
Create Date: 2025-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_users_username"),
        "users",
        ["username"],
        unique=True,
    )

    op.create_table(
        "chilaquiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("salsaType", sa.String(length=100), nullable=False),
        sa.Column("protein", sa.String(length=100), nullable=False),
        sa.Column("spiciness", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False, server_default="0"),
        sa.Column(
            "createdAt",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_chilaquiles_salsaType"), "chilaquiles", ["salsaType"])
    op.create_index(op.f("ix_chilaquiles_protein"), "chilaquiles", ["protein"])


def downgrade() -> None:
    op.drop_index(op.f("ix_chilaquiles_protein"), table_name="chilaquiles")
    op.drop_index(op.f("ix_chilaquiles_salsaType"), table_name="chilaquiles")
    op.drop_table("chilaquiles")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
