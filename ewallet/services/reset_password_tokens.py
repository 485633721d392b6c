from datetime import datetime
from typing import Optional

from sqlmodel import Session, col, select

from ewallet.models.reset_password_token import ResetPasswordToken


def get_reset_password_token(session: Session, token_id: str) -> Optional[ResetPasswordToken]:
    return session.get(ResetPasswordToken, token_id)


def get_latest_reset_password_token(session: Session, user_id: str) -> Optional[ResetPasswordToken]:
    statement = (
        select(ResetPasswordToken)
        .where(ResetPasswordToken.user_id == user_id)
        .order_by(col(ResetPasswordToken.created_at).desc())
    )
    return session.exec(statement).first()


def create_reset_password_token(
    session: Session,
    *,
    user_id: str,
    active: bool,
    expires_in: datetime,
) -> ResetPasswordToken:
    record = ResetPasswordToken(user_id=user_id, active=active, expires_in=expires_in)
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def update_reset_password_token(session: Session, record: ResetPasswordToken, **fields) -> ResetPasswordToken:
    for name, value in fields.items():
        setattr(record, name, value)
    session.add(record)
    session.commit()
    session.refresh(record)
    return record
