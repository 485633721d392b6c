from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ewallet.core.database import get_session
from ewallet.models.user import User
from ewallet.routers.auth import get_current_user
from ewallet.schemas.credit_cards import (
    CreditCardCreate,
    CreditCardListResponse,
    CreditCardRead,
    CreditCardUpdate,
)
from ewallet.services.credit_cards import CreditCardService


router = APIRouter(prefix="/users/me/credit-cards", tags=["credit-cards"])


@router.get("", response_model=CreditCardListResponse)
def list_credit_cards(
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    cards = CreditCardService.list_for_user(session, user_id=current_user.id)
    return CreditCardListResponse(
        credit_cards=[CreditCardRead.model_validate(c) for c in cards],
        total=len(cards),
    )


@router.post("", response_model=CreditCardRead, status_code=status.HTTP_201_CREATED)
def create_credit_card(
    payload: CreditCardCreate,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return CreditCardService.create(session, user_id=current_user.id, data=payload.model_dump())


@router.get("/{card_id}", response_model=CreditCardRead)
def read_credit_card(
    card_id: str,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return CreditCardService.get_for_user(session, user_id=current_user.id, card_id=card_id)


@router.put("/{card_id}", response_model=CreditCardRead)
def update_credit_card(
    card_id: str,
    payload: CreditCardUpdate,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return CreditCardService.update(
        session,
        user_id=current_user.id,
        card_id=card_id,
        data=payload.model_dump(exclude_unset=True),
    )


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_credit_card(
    card_id: str,
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    CreditCardService.delete(session, user_id=current_user.id, card_id=card_id)
