"""add_debtors_and_credit_cards

Revision ID: b2d3f4a5c6e7
Revises: a1c2e3f4b5d6
Create Date: 2026-10-19 00:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "b2d3f4a5c6e7"
down_revision: Union[str, None] = "a1c2e3f4b5d6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if "debtors" not in tables:
        op.create_table(
            "debtors",
            sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
            sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=True),
            sa.Column("phone", sa.String(length=30), nullable=True),
            sa.Column("amount", sa.Numeric(12, 2), nullable=False),
            sa.Column("description", sa.String(length=255), nullable=True),
            sa.Column("due_date", sa.Date(), nullable=True),
            sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
        )
        op.create_index("ix_debtors_user_id", "debtors", ["user_id"])
        op.create_index("ix_debtors_due_date", "debtors", ["due_date"])
        op.create_index("ix_debtors_paid", "debtors", ["paid"])
        op.create_index("ix_debtors_created_at", "debtors", ["created_at"])
        op.alter_column("debtors", "paid", server_default=None)

    if "credit_cards" not in tables:
        op.create_table(
            "credit_cards",
            sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
            sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
            sa.Column("name", sa.String(length=60), nullable=False),
            sa.Column("brand", sa.String(length=30), nullable=True),
            sa.Column("last_digits", sa.String(length=4), nullable=True),
            sa.Column("credit_limit", sa.Numeric(12, 2), nullable=False),
            sa.Column("closing_day", sa.Integer(), nullable=False),
            sa.Column("due_day", sa.Integer(), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
        )
        op.create_index("ix_credit_cards_user_id", "credit_cards", ["user_id"])
        op.create_index("ix_credit_cards_created_at", "credit_cards", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_credit_cards_created_at", table_name="credit_cards")
    op.drop_index("ix_credit_cards_user_id", table_name="credit_cards")
    op.drop_table("credit_cards")

    op.drop_index("ix_debtors_created_at", table_name="debtors")
    op.drop_index("ix_debtors_paid", table_name="debtors")
    op.drop_index("ix_debtors_due_date", table_name="debtors")
    op.drop_index("ix_debtors_user_id", table_name="debtors")
    op.drop_table("debtors")
