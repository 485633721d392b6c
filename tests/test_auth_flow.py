from sqlmodel import Session


def _sign_up(client, *, email: str, password: str = "abc12345", name: str = "Test User"):
    return client.post(
        "/api/v1/auth/sign-up",
        json={
            "email": email,
            "name": name,
            "password": password,
            "passwordConfirmation": password,
        },
    )


def test_sign_up_returns_user_without_password_and_token(client):
    res = _sign_up(client, email="new.user@example.com", name="New User")
    assert res.status_code == 201
    data = res.json()
    assert data["user"]["id"]
    assert data["user"]["email"] == "new.user@example.com"
    assert data["user"]["name"] == "New User"
    assert "password" not in data["user"]
    assert isinstance(data["token"], str) and data["token"]


def test_sign_up_without_data_returns_422(client):
    res = client.post("/api/v1/auth/sign-up", json={})
    assert res.status_code == 422
    assert res.json()["code"] == "VALIDATION_ERROR"


def test_sign_up_duplicate_email_returns_400(client):
    assert _sign_up(client, email="used.email@example.com").status_code == 201

    res = _sign_up(client, email="used.email@example.com", name="Another")
    assert res.status_code == 400
    assert res.json()["detail"] == "The provided email [used.email@example.com] is already in use"
    assert res.json()["code"] == "DUPLICATE_EMAIL"


def test_sign_up_password_mismatch_returns_400(client):
    res = client.post(
        "/api/v1/auth/sign-up",
        json={
            "email": "mismatch@example.com",
            "name": "Mismatch",
            "password": "abc12345",
            "password_confirmation": "xyz12345",
        },
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Password and password confirmation do not match"


def test_sign_in_returns_token_usable_on_protected_routes(client):
    _sign_up(client, email="login@example.com", password="abc12345")

    res = client.post("/api/v1/auth/sign-in", json={"email": "login@example.com", "password": "abc12345"})
    assert res.status_code == 200
    data = res.json()
    assert data["user"]["email"] == "login@example.com"
    assert "password" not in data["user"]

    me = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == data["user"]["id"]


def test_sign_in_is_case_insensitive_on_email(client):
    _sign_up(client, email="Mixed.Case@Example.com", password="abc12345")

    res = client.post("/api/v1/auth/sign-in", json={"email": "mixed.case@example.com", "password": "abc12345"})
    assert res.status_code == 200


def test_wrong_password_and_unknown_email_are_indistinguishable(client):
    _sign_up(client, email="victim@example.com", password="abc12345")

    wrong_password = client.post("/api/v1/auth/sign-in", json={"email": "victim@example.com", "password": "nope1234"})
    unknown_email = client.post("/api/v1/auth/sign-in", json={"email": "ghost@example.com", "password": "abc12345"})

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json()["detail"] == unknown_email.json()["detail"] == "Incorrect email/password combination"
    assert wrong_password.json()["code"] == unknown_email.json()["code"] == "INVALID_CREDENTIALS"


def test_protected_route_requires_valid_token(client):
    assert client.get("/api/v1/users/me").status_code == 401

    res = client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid JWT token"


def test_token_signed_for_deleted_user_is_rejected(client, db_session: Session, signing_provider):
    token = signing_provider.issue("00000000-0000-0000-0000-000000000000")
    res = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_responses_carry_request_id(client):
    res = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert res.status_code == 200
    assert res.headers["X-Request-ID"] == "req-123"

    err = client.post(
        "/api/v1/auth/sign-in",
        json={"email": "ghost@example.com", "password": "abc12345"},
        headers={"X-Request-ID": "req-456"},
    )
    assert err.json()["request_id"] == "req-456"
