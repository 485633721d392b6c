from sqlmodel import Session, select

from ewallet.models.reset_password_token import ResetPasswordToken


def _sign_up(client, *, email: str, password: str):
    res = client.post(
        "/api/v1/auth/sign-up",
        json={"email": email, "name": "User A", "password": password, "passwordConfirmation": password},
    )
    assert res.status_code == 201
    return res.json()["user"]


def _sign_in(client, email: str, password: str):
    return client.post("/api/v1/auth/sign-in", json={"email": email, "password": password})


def _reset(client, token: str, password: str, confirmation: str = None):
    return client.post(
        "/api/v1/auth/reset-password",
        json={
            "token": token,
            "password": password,
            "passwordConfirmation": confirmation if confirmation is not None else password,
        },
    )


def test_forgot_and_reset_password_scenario(client, db_session: Session, mail_provider):
    user = _sign_up(client, email="user.a@example.com", password="abc12345")

    forgot = client.post("/api/v1/auth/forgot-password", json={"email": "user.a@example.com"})
    assert forgot.status_code == 204
    assert len(mail_provider.sent) == 1
    envelope = mail_provider.sent[0]
    assert envelope.to.email == "user.a@example.com"
    assert envelope.sender.email == "recover@ewallet.com"
    token = mail_provider.last_reset_token()
    assert token in envelope.html_content

    reset = _reset(client, token, "newpass1")
    assert reset.status_code == 204

    assert _sign_in(client, "user.a@example.com", "abc12345").status_code == 400
    assert _sign_in(client, "user.a@example.com", "newpass1").status_code == 200

    record = db_session.exec(select(ResetPasswordToken).where(ResetPasswordToken.id == token)).one()
    db_session.refresh(record)
    assert record.active is False
    assert record.user_id == user["id"]

    again = _reset(client, token, "other123")
    assert again.status_code == 400
    assert again.json()["detail"] == "Reset password token is expired"


def test_forgot_password_twice_reuses_token(client, mail_provider):
    _sign_up(client, email="twice@example.com", password="abc12345")

    client.post("/api/v1/auth/forgot-password", json={"email": "twice@example.com"})
    first = mail_provider.last_reset_token()
    client.post("/api/v1/auth/forgot-password", json={"email": "twice@example.com"})
    second = mail_provider.last_reset_token()

    assert len(mail_provider.sent) == 2
    assert first == second


def test_forgot_password_unknown_email_returns_404(client, mail_provider):
    res = client.post("/api/v1/auth/forgot-password", json={"email": "nobody@example.com"})
    assert res.status_code == 404
    assert res.json()["code"] == "USER_NOT_FOUND"
    assert mail_provider.sent == []


def test_forgot_password_mail_failure_propagates(client, mail_provider):
    _sign_up(client, email="mailfail@example.com", password="abc12345")
    mail_provider.fail = True

    res = client.post("/api/v1/auth/forgot-password", json={"email": "mailfail@example.com"})
    assert res.status_code == 502
    assert res.json()["code"] == "MAIL_DELIVERY_FAILED"


def test_reset_password_with_unknown_token(client):
    res = _reset(client, "00000000-0000-0000-0000-000000000000", "newpass1")
    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid reset password token"


def test_reset_password_mismatch(client):
    res = _reset(client, "whatever", "newpass1", "newpass2")
    assert res.status_code == 400
    assert res.json()["detail"] == "Password and password confirmation do not match"
