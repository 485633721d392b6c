from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field

from .base import BaseModel


class ResetPasswordToken(BaseModel, table=True):
    """
    Token de recuperación de contraseña. El `id` se envía tal cual al usuario.

    Estados: activo y vigente, consumido (`active=False`) o vencido
    (`expires_in` en el pasado). No se borran, solo se desactivan.
    Las fechas se guardan en UTC sin zona horaria.
    """
    __tablename__ = "reset_password_tokens"

    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)
    active: bool = Field(default=True, index=True)
    expires_in: datetime = Field(sa_type=DateTime, index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime, index=True)
