"""
Esquemas Pydantic para deudores
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class DebtorBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=30)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)
    due_date: Optional[date] = None


class DebtorCreate(DebtorBase):
    pass


class DebtorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=30)
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)
    due_date: Optional[date] = None
    paid: Optional[bool] = None


class DebtorRead(DebtorBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    paid: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class DebtorListResponse(BaseModel):
    debtors: List[DebtorRead]
    total: int
    total_pending: Decimal
