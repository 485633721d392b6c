from decimal import Decimal


def _auth_headers(client, email: str) -> dict:
    res = client.post(
        "/api/v1/auth/sign-up",
        json={"email": email, "name": "Owner", "password": "abc12345", "passwordConfirmation": "abc12345"},
    )
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['token']}"}


def test_credit_cards_crud(client):
    headers = _auth_headers(client, "cards@example.com")

    created = client.post(
        "/api/v1/users/me/credit-cards",
        json={
            "name": "Travel card",
            "brand": "visa",
            "last_digits": "4242",
            "credit_limit": "5000.00",
            "closing_day": 5,
            "due_day": 15,
        },
        headers=headers,
    )
    assert created.status_code == 201
    card = created.json()
    assert card["last_digits"] == "4242"
    assert Decimal(card["credit_limit"]) == Decimal("5000.00")

    listing = client.get("/api/v1/users/me/credit-cards", headers=headers).json()
    assert listing["total"] == 1
    assert listing["credit_cards"][0]["id"] == card["id"]

    updated = client.put(
        f"/api/v1/users/me/credit-cards/{card['id']}",
        json={"credit_limit": "7500.00", "due_day": 20},
        headers=headers,
    )
    assert updated.status_code == 200
    assert Decimal(updated.json()["credit_limit"]) == Decimal("7500.00")
    assert updated.json()["due_day"] == 20
    assert updated.json()["closing_day"] == 5

    assert client.delete(f"/api/v1/users/me/credit-cards/{card['id']}", headers=headers).status_code == 204
    assert client.get(f"/api/v1/users/me/credit-cards/{card['id']}", headers=headers).status_code == 404


def test_credit_card_validation(client):
    headers = _auth_headers(client, "invalid.card@example.com")

    bad_digits = client.post(
        "/api/v1/users/me/credit-cards",
        json={"name": "Card", "last_digits": "42", "closing_day": 5, "due_day": 15},
        headers=headers,
    )
    assert bad_digits.status_code == 422

    bad_day = client.post(
        "/api/v1/users/me/credit-cards",
        json={"name": "Card", "closing_day": 0, "due_day": 32},
        headers=headers,
    )
    assert bad_day.status_code == 422


def test_credit_cards_are_scoped_to_owner(client):
    owner = _auth_headers(client, "card.owner@example.com")
    intruder = _auth_headers(client, "card.intruder@example.com")

    card = client.post(
        "/api/v1/users/me/credit-cards",
        json={"name": "Mine", "closing_day": 1, "due_day": 10},
        headers=owner,
    ).json()

    res = client.put(f"/api/v1/users/me/credit-cards/{card['id']}", json={"name": "Stolen"}, headers=intruder)
    assert res.status_code == 404
    assert res.json()["code"] == "NOT_FOUND"


def test_credit_card_update_ignores_null_fields(client):
    headers = _auth_headers(client, "nullcard@example.com")
    card = client.post(
        "/api/v1/users/me/credit-cards",
        json={"name": "Daily", "brand": "master", "last_digits": "1111", "credit_limit": "800", "closing_day": 3, "due_day": 10},
        headers=headers,
    ).json()

    res = client.put(
        f"/api/v1/users/me/credit-cards/{card['id']}",
        json={"closing_day": None, "name": None, "due_day": 12},
        headers=headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["closing_day"] == 3
    assert body["name"] == "Daily"
    assert body["due_day"] == 12
