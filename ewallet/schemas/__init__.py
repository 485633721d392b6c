# Schemas
from .users import (
    UserCreate,
    UserUpdate,
    UserRead
)

from .auth import (
    AuthenticateRequest,
    AuthResponse,
    ForgotPasswordRequest,
    ResetPasswordRequest
)

from .debtors import (
    DebtorCreate,
    DebtorUpdate,
    DebtorRead,
    DebtorListResponse
)

from .credit_cards import (
    CreditCardCreate,
    CreditCardUpdate,
    CreditCardRead,
    CreditCardListResponse
)

__all__ = [
    # Users
    "UserCreate",
    "UserUpdate",
    "UserRead",
    # Auth
    "AuthenticateRequest",
    "AuthResponse",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    # Debtors
    "DebtorCreate",
    "DebtorUpdate",
    "DebtorRead",
    "DebtorListResponse",
    # Credit cards
    "CreditCardCreate",
    "CreditCardUpdate",
    "CreditCardRead",
    "CreditCardListResponse"
]
