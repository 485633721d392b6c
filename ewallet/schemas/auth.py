"""
Esquemas Pydantic para autenticación
"""
from pydantic import AliasChoices, BaseModel, EmailStr, Field

from ewallet.schemas.users import UserRead


class AuthenticateRequest(BaseModel):
    """Credenciales de inicio de sesión"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class AuthResponse(BaseModel):
    """Usuario sanitizado + token de acceso"""
    user: UserRead
    token: str


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=6, max_length=72)
    password_confirmation: str = Field(
        min_length=6,
        max_length=72,
        validation_alias=AliasChoices("password_confirmation", "passwordConfirmation"),
    )
