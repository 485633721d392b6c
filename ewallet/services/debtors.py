from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List

from sqlalchemy import func
from sqlmodel import Session, col, select

from ewallet.core.errors import NotFound
from ewallet.models.debtor import Debtor


class DebtorNotFound(NotFound):
    message = "Debtor not found"


class DebtorService:
    @staticmethod
    def list_for_user(session: Session, *, user_id: str, paid: bool | None = None) -> List[Debtor]:
        statement = select(Debtor).where(Debtor.user_id == user_id)
        if paid is not None:
            statement = statement.where(Debtor.paid == paid)
        statement = statement.order_by(col(Debtor.created_at).desc())
        return list(session.exec(statement).all())

    @staticmethod
    def total_pending(session: Session, *, user_id: str) -> Decimal:
        total = session.exec(
            select(func.coalesce(func.sum(Debtor.amount), 0)).where(
                Debtor.user_id == user_id,
                Debtor.paid == False,
            )
        ).one()
        return Decimal(str(total)).quantize(Decimal("0.01"))

    @staticmethod
    def get_for_user(session: Session, *, user_id: str, debtor_id: str) -> Debtor:
        debtor = session.get(Debtor, debtor_id)
        # Deudores de otro usuario se reportan igual que inexistentes
        if not debtor or debtor.user_id != user_id:
            raise DebtorNotFound()
        return debtor

    @staticmethod
    def create(session: Session, *, user_id: str, data: dict) -> Debtor:
        debtor = Debtor(user_id=user_id, **data)
        session.add(debtor)
        session.commit()
        session.refresh(debtor)
        return debtor

    @staticmethod
    def update(session: Session, *, user_id: str, debtor_id: str, data: dict) -> Debtor:
        debtor = DebtorService.get_for_user(session, user_id=user_id, debtor_id=debtor_id)
        # Un null en una actualización parcial deja el campo como está
        for name, value in data.items():
            if value is None:
                continue
            setattr(debtor, name, value)
        debtor.updated_at = datetime.utcnow()
        session.add(debtor)
        session.commit()
        session.refresh(debtor)
        return debtor

    @staticmethod
    def delete(session: Session, *, user_id: str, debtor_id: str) -> None:
        debtor = DebtorService.get_for_user(session, user_id=user_id, debtor_id=debtor_id)
        session.delete(debtor)
        session.commit()
