def _auth_headers(client, email: str, password: str = "abc12345") -> dict:
    res = client.post(
        "/api/v1/auth/sign-up",
        json={"email": email, "name": "Owner", "password": password, "passwordConfirmation": password},
    )
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['token']}"}


def test_update_me_changes_name_and_email(client):
    headers = _auth_headers(client, "profile@example.com")

    res = client.put("/api/v1/users/me", json={"name": "Renamed", "email": "New.Profile@example.com"}, headers=headers)
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "Renamed"
    assert data["email"] == "new.profile@example.com"
    assert data["updated_at"] is not None

    login = client.post("/api/v1/auth/sign-in", json={"email": "new.profile@example.com", "password": "abc12345"})
    assert login.status_code == 200


def test_update_me_rejects_email_in_use(client):
    _auth_headers(client, "taken@example.com")
    headers = _auth_headers(client, "other@example.com")

    res = client.put("/api/v1/users/me", json={"email": "taken@example.com"}, headers=headers)
    assert res.status_code == 400
    assert res.json()["code"] == "DUPLICATE_EMAIL"


def test_delete_me_removes_account_and_owned_records(client):
    headers = _auth_headers(client, "bye@example.com")
    client.post("/api/v1/users/me/debtors", json={"name": "Bob", "amount": "10.00"}, headers=headers)
    client.post("/api/v1/auth/forgot-password", json={"email": "bye@example.com"})

    res = client.delete("/api/v1/users/me", headers=headers)
    assert res.status_code == 204

    assert client.get("/api/v1/users/me", headers=headers).status_code == 401
    login = client.post("/api/v1/auth/sign-in", json={"email": "bye@example.com", "password": "abc12345"})
    assert login.status_code == 400
