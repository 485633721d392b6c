"""
Modelos base para la API eWallet
"""
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
import uuid


def generate_uuid() -> str:
    return str(uuid.uuid4())


class BaseModel(SQLModel):
    """Modelo base con id UUID (texto) para todas las entidades"""
    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)


class TimestampMixin(SQLModel):
    """Mixin para campos de timestamp comunes (UTC sin zona horaria)"""
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime, index=True)
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime)


class BaseModelWithTimestamp(BaseModel, TimestampMixin):
    """Modelo base que combina BaseModel con TimestampMixin"""
    pass
