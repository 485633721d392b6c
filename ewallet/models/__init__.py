"""
Modelos SQLModel para la API eWallet
"""

from .base import (
    BaseModel,
    TimestampMixin,
    BaseModelWithTimestamp
)

from .user import User
from .reset_password_token import ResetPasswordToken
from .debtor import Debtor
from .credit_card import CreditCard

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "BaseModelWithTimestamp",
    "User",
    "ResetPasswordToken",
    "Debtor",
    "CreditCard",
]
