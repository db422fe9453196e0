from __future__ import annotations

from uberapp_api.app.core.security import create_access_token, validate_token_user

SESSIONS = "/v1/sessions"


def _login(client, email: str, password: str):
    return client.post(SESSIONS, json={"emailAddress": email, "password": password})


def test_passenger_login_issues_token(client, passenger_payload: dict) -> None:
    passenger_id = client.post("/v1/passengers", json=passenger_payload).json()["id"]

    response = _login(client, passenger_payload["emailAddress"], passenger_payload["password"])

    assert response.status_code == 201
    body = response.json()
    assert body["userID"] == passenger_id
    assert body["accountType"] == "passenger"
    assert validate_token_user(body["token"]) == passenger_id


def test_current_session_resolves_driver(client, driver_payload: dict) -> None:
    driver_id = client.post("/v1/drivers", json=driver_payload).json()["id"]
    token = _login(client, driver_payload["emailAddress"], driver_payload["password"]).json()["token"]

    response = client.get(f"{SESSIONS}/current", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    body = response.json()
    assert body["userID"] == driver_id
    assert body["accountType"] == "driver"
    assert body["account"]["drivingLicense"] == "D1234567"
    assert "password" not in body["account"]


def test_wrong_credentials_are_rejected(client, passenger_payload: dict) -> None:
    client.post("/v1/passengers", json=passenger_payload)

    assert _login(client, passenger_payload["emailAddress"], "wrong-password").status_code == 401
    assert _login(client, "nobody@example.com", "123456").status_code == 401


def test_current_session_requires_valid_token(client) -> None:
    missing = client.get(f"{SESSIONS}/current")
    invalid = client.get(f"{SESSIONS}/current", headers={"Authorization": "Bearer garbage"})
    expired = client.get(
        f"{SESSIONS}/current",
        headers={"Authorization": f"Bearer {create_access_token('someone', expires_delta=-60)}"},
    )

    for response in (missing, invalid, expired):
        assert response.status_code == 401
        assert response.json()["code"] == 4010


def test_token_of_deleted_account_is_rejected(client, passenger_payload: dict) -> None:
    passenger_id = client.post("/v1/passengers", json=passenger_payload).json()["id"]
    token = _login(client, passenger_payload["emailAddress"], passenger_payload["password"]).json()["token"]
    client.delete(f"/v1/passengers/{passenger_id}")

    response = client.get(f"{SESSIONS}/current", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
