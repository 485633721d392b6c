"""create_users_and_reset_password_tokens

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "a1c2e3f4b5d6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("password", sa.String(length=255), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
        )
        op.create_index("ix_users_email", "users", ["email"], unique=True)
        op.create_index("ix_users_created_at", "users", ["created_at"])

    if "reset_password_tokens" not in tables:
        op.create_table(
            "reset_password_tokens",
            sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
            sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
            sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column("expires_in", sa.DateTime(), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False),
        )
        op.create_index("ix_reset_password_tokens_user_id", "reset_password_tokens", ["user_id"])
        op.create_index("ix_reset_password_tokens_active", "reset_password_tokens", ["active"])
        op.create_index("ix_reset_password_tokens_expires_in", "reset_password_tokens", ["expires_in"])
        op.create_index("ix_reset_password_tokens_created_at", "reset_password_tokens", ["created_at"])
        op.alter_column("reset_password_tokens", "active", server_default=None)


def downgrade() -> None:
    op.drop_index("ix_reset_password_tokens_created_at", table_name="reset_password_tokens")
    op.drop_index("ix_reset_password_tokens_expires_in", table_name="reset_password_tokens")
    op.drop_index("ix_reset_password_tokens_active", table_name="reset_password_tokens")
    op.drop_index("ix_reset_password_tokens_user_id", table_name="reset_password_tokens")
    op.drop_table("reset_password_tokens")

    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
