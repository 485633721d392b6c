from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, Numeric
from sqlmodel import Field

from .base import BaseModelWithTimestamp


class Debtor(BaseModelWithTimestamp, table=True):
    __tablename__ = "debtors"

    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)
    name: str = Field(max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=30)
    amount: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False))
    description: Optional[str] = Field(default=None, max_length=255)
    due_date: Optional[date] = Field(default=None, index=True)
    paid: bool = Field(default=False, index=True)
