"""
Autenticación, registro y ciclo de vida de tokens de recuperación de contraseña.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from sqlmodel import Session

from ewallet.core.config import Settings, settings as app_settings
from ewallet.core.database import get_session
from ewallet.core.errors import ExpiredResetToken, InvalidCredentials, InvalidResetToken, PasswordMismatch
from ewallet.core.security import (
    BCryptHashProvider,
    JWTSigningProvider,
    get_hash_provider,
    get_signing_provider,
)
from ewallet.models.reset_password_token import ResetPasswordToken
from ewallet.models.user import User
from ewallet.schemas.auth import AuthResponse
from ewallet.schemas.users import UserRead
from ewallet.services import reset_password_tokens
from ewallet.services.email_service import (
    EmailAddress,
    EmailEnvelope,
    SMTPMailProvider,
    build_reset_password_link,
    get_mail_provider,
    render_forgot_password_email,
)
from ewallet.services.users import UserService


logger = logging.getLogger(__name__)


class AuthService:
    """
    Servicio sin estado entre peticiones: solo guarda referencias a los
    colaboradores (sesión, hash, firma, email) de la petición actual.
    """

    def __init__(
        self,
        session: Session,
        hash_provider: BCryptHashProvider,
        signing_provider: JWTSigningProvider,
        mail_provider: SMTPMailProvider,
        config: Optional[Settings] = None,
    ):
        self.session = session
        self.hash_provider = hash_provider
        self.signing_provider = signing_provider
        self.mail_provider = mail_provider
        self.config = config or app_settings

    def _now(self) -> datetime:
        return datetime.utcnow()

    def _issue_token(self, user: User) -> AuthResponse:
        token = self.signing_provider.issue(
            user.id, timedelta(minutes=self.config.access_token_expire_minutes)
        )
        return AuthResponse(user=UserRead.model_validate(user), token=token)

    def authenticate(self, email: str, password: str) -> AuthResponse:
        user = UserService.get_user_by_email(self.session, email)
        if not user:
            logger.warning("Inicio de sesión fallido")
            raise InvalidCredentials()

        if not self.hash_provider.compare_hash(password, user.password):
            logger.warning("Inicio de sesión fallido")
            raise InvalidCredentials()

        logger.info("Inicio de sesión user_id=%s", user.id)
        return self._issue_token(user)

    def register(self, *, email: str, name: str, password: str, password_confirmation: str) -> AuthResponse:
        user = UserService.create_user(
            self.session,
            email=email,
            name=name,
            password=password,
            password_confirmation=password_confirmation,
            hash_provider=self.hash_provider,
        )
        return self._issue_token(user)

    def generate_reset_password_token(self, user_id: str) -> ResetPasswordToken:
        """
        Devuelve el último token del usuario si sigue activo y vigente; si no,
        crea uno nuevo. Pedirlo otra vez no extiende el vencimiento.
        """
        now = self._now()
        last_token = reset_password_tokens.get_latest_reset_password_token(self.session, user_id)

        is_last_token_expired = (
            last_token is None
            or not last_token.active
            or last_token.expires_in < now
        )
        if not is_last_token_expired:
            return last_token

        token = reset_password_tokens.create_reset_password_token(
            self.session,
            user_id=user_id,
            active=True,
            expires_in=now + timedelta(minutes=self.config.reset_password_token_expires_in),
        )
        logger.info("Token de recuperación emitido user_id=%s", user_id)
        return token

    def send_forgot_password_email(self, email: str) -> None:
        user = UserService.find_by_email(self.session, email)
        token = self.generate_reset_password_token(user.id)

        reset_link = build_reset_password_link(token, self.config)
        envelope = EmailEnvelope(
            subject=self.config.forgot_password_subject,
            sender=EmailAddress(name=self.config.mail_from_name, email=self.config.mail_from_email),
            to=EmailAddress(name=user.name, email=user.email),
            html_content=render_forgot_password_email(user, token, reset_link),
            text_content=(
                "We received a request to reset your eWallet password.\n\n"
                f"Open this link to continue: {reset_link}\n\n"
                "If you did not ask for this change you can ignore this email."
            ),
        )
        self.mail_provider.send_email(envelope)

    def reset_password(self, *, token: str, password: str, password_confirmation: str) -> None:
        if password != password_confirmation:
            raise PasswordMismatch()

        record = reset_password_tokens.get_reset_password_token(self.session, token)
        if not record:
            raise InvalidResetToken()

        user = UserService.get_user_by_id(self.session, record.user_id)
        if not user:
            raise InvalidResetToken()

        if self._now() > record.expires_in or not record.active:
            raise ExpiredResetToken()

        # El usuario se actualiza antes de invalidar el token; no es atómico.
        UserService.update_user(
            self.session,
            user_id=user.id,
            password_hash=self.hash_provider.generate_hash(password),
        )
        reset_password_tokens.update_reset_password_token(self.session, record, active=False)
        logger.info("Contraseña restablecida user_id=%s", user.id)


def get_auth_service(
    session: Session = Depends(get_session),
    hash_provider: BCryptHashProvider = Depends(get_hash_provider),
    signing_provider: JWTSigningProvider = Depends(get_signing_provider),
    mail_provider: SMTPMailProvider = Depends(get_mail_provider),
) -> AuthService:
    return AuthService(session, hash_provider, signing_provider, mail_provider)
