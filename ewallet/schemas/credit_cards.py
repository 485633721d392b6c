"""
Esquemas Pydantic para tarjetas de crédito
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreditCardBase(BaseModel):
    name: str = Field(min_length=1, max_length=60)
    brand: Optional[str] = Field(default=None, max_length=30)
    last_digits: Optional[str] = Field(default=None, pattern=r"^\d{4}$")
    credit_limit: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=12, decimal_places=2)
    closing_day: int = Field(ge=1, le=31)
    due_day: int = Field(ge=1, le=31)


class CreditCardCreate(CreditCardBase):
    pass


class CreditCardUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=60)
    brand: Optional[str] = Field(default=None, max_length=30)
    last_digits: Optional[str] = Field(default=None, pattern=r"^\d{4}$")
    credit_limit: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    closing_day: Optional[int] = Field(default=None, ge=1, le=31)
    due_day: Optional[int] = Field(default=None, ge=1, le=31)


class CreditCardRead(CreditCardBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class CreditCardListResponse(BaseModel):
    credit_cards: List[CreditCardRead]
    total: int
