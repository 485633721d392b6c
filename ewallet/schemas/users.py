"""
Esquemas Pydantic para usuarios (API)
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime


class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)


class UserCreate(UserBase):
    """Esquema para crear usuario"""
    password: str = Field(min_length=6, max_length=72, description="Contraseña (mínimo 6 caracteres)")
    password_confirmation: str = Field(
        min_length=6,
        max_length=72,
        validation_alias=AliasChoices("password_confirmation", "passwordConfirmation"),
    )


class UserUpdate(BaseModel):
    """Esquema para actualizar usuario"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None


class UserRead(UserBase):
    """Esquema para leer usuario (respuesta). Nunca incluye la contraseña."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None
