from sqlmodel import Field

from .base import BaseModelWithTimestamp


class User(BaseModelWithTimestamp, table=True):
    """Usuario de la billetera. `password` guarda siempre el hash bcrypt."""
    __tablename__ = "users"

    name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=255)
