from __future__ import annotations

from datetime import datetime
from typing import List

from sqlmodel import Session, col, select

from ewallet.core.errors import NotFound
from ewallet.models.credit_card import CreditCard


class CreditCardNotFound(NotFound):
    message = "Credit card not found"


class CreditCardService:
    @staticmethod
    def list_for_user(session: Session, *, user_id: str) -> List[CreditCard]:
        statement = (
            select(CreditCard)
            .where(CreditCard.user_id == user_id)
            .order_by(col(CreditCard.created_at).desc())
        )
        return list(session.exec(statement).all())

    @staticmethod
    def get_for_user(session: Session, *, user_id: str, card_id: str) -> CreditCard:
        card = session.get(CreditCard, card_id)
        if not card or card.user_id != user_id:
            raise CreditCardNotFound()
        return card

    @staticmethod
    def create(session: Session, *, user_id: str, data: dict) -> CreditCard:
        card = CreditCard(user_id=user_id, **data)
        session.add(card)
        session.commit()
        session.refresh(card)
        return card

    @staticmethod
    def update(session: Session, *, user_id: str, card_id: str, data: dict) -> CreditCard:
        card = CreditCardService.get_for_user(session, user_id=user_id, card_id=card_id)
        # Un null en una actualización parcial deja el campo como está
        for name, value in data.items():
            if value is None:
                continue
            setattr(card, name, value)
        card.updated_at = datetime.utcnow()
        session.add(card)
        session.commit()
        session.refresh(card)
        return card

    @staticmethod
    def delete(session: Session, *, user_id: str, card_id: str) -> None:
        card = CreditCardService.get_for_user(session, user_id=user_id, card_id=card_id)
        session.delete(card)
        session.commit()
