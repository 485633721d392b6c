from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, Numeric
from sqlmodel import Field

from .base import BaseModelWithTimestamp


class CreditCard(BaseModelWithTimestamp, table=True):
    __tablename__ = "credit_cards"

    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)
    name: str = Field(max_length=60)
    brand: Optional[str] = Field(default=None, max_length=30)
    last_digits: Optional[str] = Field(default=None, max_length=4)
    credit_limit: Decimal = Field(default=Decimal("0.00"), sa_column=Column(Numeric(12, 2), nullable=False))
    closing_day: int
    due_day: int
