"""
Router del usuario autenticado
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ewallet.core.database import get_session
from ewallet.models.user import User
from ewallet.routers.auth import get_current_user
from ewallet.schemas.users import UserRead, UserUpdate
from ewallet.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    """
    Obtener información del usuario autenticado

    Requiere token JWT válido en el header:
    Authorization: Bearer <token>
    """
    return current_user


@router.put("/me", response_model=UserRead)
def update_me(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Actualizar nombre y/o email"""
    return UserService.update_user(
        session,
        user_id=current_user.id,
        name=data.name,
        email=data.email,
    )


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Eliminar la cuenta junto con deudores y tarjetas"""
    UserService.delete_user(session, current_user.id)
