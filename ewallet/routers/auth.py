"""
Router de autenticación
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from ewallet.core.database import get_session
from ewallet.core.rate_limit import AUTH_RATE_LIMIT, PASSWORD_RATE_LIMIT, limiter
from ewallet.core.security import JWTSigningProvider, get_signing_provider
from ewallet.models.user import User
from ewallet.schemas.auth import AuthenticateRequest, AuthResponse, ForgotPasswordRequest, ResetPasswordRequest
from ewallet.schemas.users import UserCreate
from ewallet.services.auth import AuthService, get_auth_service
from ewallet.services.users import UserService

router = APIRouter(prefix="/auth", tags=["authentication"])

# OAuth2 scheme para extraer el token del header Authorization
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/sign-in")


def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Session = Depends(get_session),
    signing_provider: JWTSigningProvider = Depends(get_signing_provider),
) -> User:
    """Obtener usuario actual desde el token JWT"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid JWT token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = signing_provider.decode(token)
    if payload is None:
        raise credentials_exception

    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception

    user = UserService.get_user_by_id(session, user_id)
    if user is None:
        raise credentials_exception

    return user


@router.post("/sign-in", response_model=AuthResponse)
@limiter.limit(AUTH_RATE_LIMIT)
def sign_in(
    request: Request,
    credentials: AuthenticateRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Iniciar sesión con email y contraseña

    Retorna el usuario (sin contraseña) y un token JWT
    """
    return auth_service.authenticate(credentials.email, credentials.password)


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_RATE_LIMIT)
def sign_up(
    request: Request,
    data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Registrar un nuevo usuario y devolver su token de acceso"""
    return auth_service.register(
        email=data.email,
        name=data.name,
        password=data.password,
        password_confirmation=data.password_confirmation,
    )


@router.post("/forgot-password", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(PASSWORD_RATE_LIMIT)
def forgot_password(
    request: Request,
    data: ForgotPasswordRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Enviar email con el link de recuperación de contraseña"""
    auth_service.send_forgot_password_email(data.email)


@router.post("/reset-password", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(PASSWORD_RATE_LIMIT)
def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Definir una nueva contraseña usando el token recibido por email"""
    auth_service.reset_password(
        token=data.token,
        password=data.password,
        password_confirmation=data.password_confirmation,
    )


# Exportar funciones de dependencia para usar en otros routers
__all__ = ["get_current_user"]
