"""
Servicio CRUD para usuarios
"""
import logging
from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from ewallet.core.errors import DuplicateEmail, PasswordMismatch, UserNotFound
from ewallet.core.security import BCryptHashProvider, hash_provider as default_hash_provider
from ewallet.models.credit_card import CreditCard
from ewallet.models.debtor import Debtor
from ewallet.models.reset_password_token import ResetPasswordToken
from ewallet.models.user import User


logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    # Normalizar email a lowercase para evitar duplicados por case
    return email.lower().strip()


class UserService:
    """Servicio para operaciones CRUD de usuarios"""

    @staticmethod
    def create_user(
        session: Session,
        *,
        email: str,
        name: str,
        password: str,
        password_confirmation: str,
        hash_provider: Optional[BCryptHashProvider] = None,
    ) -> User:
        """
        Crear un nuevo usuario

        Args:
            session: Sesión de base de datos
            email: Email único
            name: Nombre del usuario
            password: Contraseña en texto plano (será hasheada)
            password_confirmation: Debe coincidir con `password`

        Raises:
            PasswordMismatch: si la confirmación no coincide
            DuplicateEmail: si el email ya está registrado
        """
        if password != password_confirmation:
            raise PasswordMismatch()

        email_normalized = normalize_email(email)
        if UserService.get_user_by_email(session, email_normalized):
            raise DuplicateEmail(email)

        hasher = hash_provider or default_hash_provider
        db_user = User(
            email=email_normalized,
            name=name.strip(),
            password=hasher.generate_hash(password),
        )

        session.add(db_user)
        session.commit()
        session.refresh(db_user)

        logger.info("Usuario creado id=%s", db_user.id)
        return db_user

    @staticmethod
    def get_user_by_id(session: Session, user_id: str) -> Optional[User]:
        """Obtener usuario por ID"""
        return session.get(User, user_id)

    @staticmethod
    def get_user_by_email(session: Session, email: str) -> Optional[User]:
        """Obtener usuario por email"""
        statement = select(User).where(User.email == normalize_email(email))
        return session.exec(statement).first()

    @staticmethod
    def find_by_email(session: Session, email: str) -> User:
        """Igual que get_user_by_email pero falla con UserNotFound"""
        user = UserService.get_user_by_email(session, email)
        if not user:
            raise UserNotFound()
        return user

    @staticmethod
    def update_user(
        session: Session,
        *,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> Optional[User]:
        """
        Actualizar datos de un usuario

        Returns:
            Usuario actualizado o None si no existe
        """
        db_user = session.get(User, user_id)
        if not db_user:
            return None

        if name is not None:
            db_user.name = name.strip()
        if email is not None:
            email_normalized = normalize_email(email)
            if email_normalized != db_user.email:
                if UserService.get_user_by_email(session, email_normalized):
                    raise DuplicateEmail(email)
                db_user.email = email_normalized
        if password_hash is not None:
            db_user.password = password_hash
        db_user.updated_at = datetime.utcnow()

        session.add(db_user)
        session.commit()
        session.refresh(db_user)

        return db_user

    @staticmethod
    def delete_user(session: Session, user_id: str) -> bool:
        """
        Eliminar un usuario junto con sus deudores, tarjetas y tokens

        Returns:
            True si se eliminó, False si no existe
        """
        db_user = session.get(User, user_id)
        if not db_user:
            return False

        for model in (ResetPasswordToken, Debtor, CreditCard):
            for record in session.exec(select(model).where(model.user_id == user_id)).all():
                session.delete(record)
        session.delete(db_user)
        session.commit()

        logger.info("Usuario eliminado id=%s", user_id)
        return True
