from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from ewallet.core.database import get_session
from ewallet.models.user import User
from ewallet.routers.auth import get_current_user
from ewallet.schemas.debtors import DebtorCreate, DebtorListResponse, DebtorRead, DebtorUpdate
from ewallet.services.debtors import DebtorService


router = APIRouter(prefix="/users/me/debtors", tags=["debtors"])


@router.get("", response_model=DebtorListResponse)
def list_debtors(
    paid: Optional[bool] = Query(default=None),
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    debtors = DebtorService.list_for_user(session, user_id=current_user.id, paid=paid)
    return DebtorListResponse(
        debtors=[DebtorRead.model_validate(d) for d in debtors],
        total=len(debtors),
        total_pending=DebtorService.total_pending(session, user_id=current_user.id),
    )


@router.post("", response_model=DebtorRead, status_code=status.HTTP_201_CREATED)
def create_debtor(
    payload: DebtorCreate,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return DebtorService.create(session, user_id=current_user.id, data=payload.model_dump())


@router.get("/{debtor_id}", response_model=DebtorRead)
def read_debtor(
    debtor_id: str,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return DebtorService.get_for_user(session, user_id=current_user.id, debtor_id=debtor_id)


@router.put("/{debtor_id}", response_model=DebtorRead)
def update_debtor(
    debtor_id: str,
    payload: DebtorUpdate,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return DebtorService.update(
        session,
        user_id=current_user.id,
        debtor_id=debtor_id,
        data=payload.model_dump(exclude_unset=True),
    )


@router.delete("/{debtor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_debtor(
    debtor_id: str,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    DebtorService.delete(session, user_id=current_user.id, debtor_id=debtor_id)
