from __future__ import annotations

import uuid

from uberapp_api.app.core.security import verify_password

PASSENGERS = "/v1/passengers"
DRIVERS = "/v1/drivers"


def test_create_passenger_hashes_password(client, store, passenger_payload: dict) -> None:
    response = client.post(PASSENGERS, json=passenger_payload)

    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert body["emailAddress"] == "hectorguo@live.com"
    assert body["addressLine2"] is None

    stored = store.repository("passengers").get(body["id"])
    assert stored["password"] != "123456"
    assert verify_password("123456", stored["password"])


def test_passenger_email_conflicts_with_driver(client, driver_payload: dict, passenger_payload: dict) -> None:
    assert client.post(DRIVERS, json=driver_payload).status_code == 201
    passenger_payload["emailAddress"] = driver_payload["emailAddress"]

    response = client.post(PASSENGERS, json=passenger_payload)

    assert response.status_code == 400
    assert response.json()["code"] == 3002
    assert client.get(PASSENGERS).json() == []


def test_driver_email_conflicts_with_passenger(client, driver_payload: dict, passenger_payload: dict) -> None:
    assert client.post(PASSENGERS, json=passenger_payload).status_code == 201
    driver_payload["emailAddress"] = passenger_payload["emailAddress"]

    response = client.post(DRIVERS, json=driver_payload)

    assert response.status_code == 400
    assert response.json()["code"] == 3002


def test_duplicate_passenger_email_is_rejected(client, passenger_payload: dict) -> None:
    assert client.post(PASSENGERS, json=passenger_payload).status_code == 201

    response = client.post(PASSENGERS, json={**passenger_payload, "firstName": "Other"})

    assert response.status_code == 400
    assert response.json()["code"] == 3002


def test_create_passenger_validation(client, passenger_payload: dict) -> None:
    passenger_payload["emailAddress"] = "not-an-email"

    response = client.post(PASSENGERS, json=passenger_payload)

    assert response.status_code == 400
    assert response.json()["code"] == 3001
    assert "emailAddress" in response.json()["detail"]


def test_patch_password_is_rehashed(client, store, passenger_payload: dict) -> None:
    passenger_id = client.post(PASSENGERS, json=passenger_payload).json()["id"]
    repository = store.repository("passengers")
    old_hash = repository.get(passenger_id)["password"]

    untouched = client.patch(f"{PASSENGERS}/{passenger_id}", json={"password": "", "city": "Palo Alto"})
    assert untouched.status_code == 200
    assert repository.get(passenger_id)["password"] == old_hash
    assert repository.get(passenger_id)["city"] == "Palo Alto"

    changed = client.patch(f"{PASSENGERS}/{passenger_id}", json={"password": "new-password"})
    assert changed.status_code == 200
    assert changed.json() == f"Passenger: {passenger_id} updated"
    new_hash = repository.get(passenger_id)["password"]
    assert new_hash != "new-password"
    assert verify_password("new-password", new_hash)


def test_patch_email_must_stay_unique(client, driver_payload: dict, passenger_payload: dict) -> None:
    client.post(DRIVERS, json=driver_payload)
    passenger_id = client.post(PASSENGERS, json=passenger_payload).json()["id"]

    conflict = client.patch(f"{PASSENGERS}/{passenger_id}", json={"emailAddress": driver_payload["emailAddress"]})
    same = client.patch(f"{PASSENGERS}/{passenger_id}", json={"emailAddress": passenger_payload["emailAddress"]})

    assert conflict.status_code == 400
    assert conflict.json()["code"] == 3002
    assert same.status_code == 200
    assert client.get(f"{PASSENGERS}/{passenger_id}").json()["emailAddress"] == passenger_payload["emailAddress"]


def test_driver_crud(client, driver_payload: dict) -> None:
    created = client.post(DRIVERS, json=driver_payload).json()

    assert created["drivingLicense"] == "D1234567"
    assert "password" not in created
    assert client.patch(f"{DRIVERS}/{created['id']}", json={"licensedState": "NV"}).status_code == 200
    assert client.get(f"{DRIVERS}/{created['id']}").json()["licensedState"] == "NV"
    assert client.delete(f"{DRIVERS}/{created['id']}").json() == f"Driver: {created['id']} deleted"
    assert client.get(f"{DRIVERS}/{created['id']}").status_code == 404


def test_list_accounts_cannot_sort_by_password(client, passenger_payload: dict) -> None:
    client.post(PASSENGERS, json=passenger_payload)

    assert client.get(PASSENGERS, params={"sort": "password", "sortOrder": "asc"}).status_code == 400
    assert len(client.get(PASSENGERS, params={"sort": "lastName", "sortOrder": "asc"}).json()) == 1


def test_driver_cars_sub_resource(client, driver_payload: dict, car_payload: dict) -> None:
    driver_id = client.post(DRIVERS, json=driver_payload).json()["id"]
    client.post("/v1/cars", json={**car_payload, "license": "UNOWNED"})

    created = client.post(f"{DRIVERS}/{driver_id}/cars", json=car_payload)
    listed = client.get(f"{DRIVERS}/{driver_id}/cars")

    assert created.status_code == 201
    assert created.json()["driverId"] == driver_id
    assert listed.status_code == 200
    assert [car["id"] for car in listed.json()] == [created.json()["id"]]


def test_driver_cars_for_unknown_driver(client, car_payload: dict) -> None:
    unknown = uuid.uuid4()

    assert client.get(f"{DRIVERS}/{unknown}/cars").status_code == 404
    assert client.post(f"{DRIVERS}/{unknown}/cars", json=car_payload).status_code == 404
    assert client.get("/v1/cars").json() == []


def test_deleting_driver_keeps_cars(client, driver_payload: dict, car_payload: dict) -> None:
    driver_id = client.post(DRIVERS, json=driver_payload).json()["id"]
    car_id = client.post(f"{DRIVERS}/{driver_id}/cars", json=car_payload).json()["id"]

    client.delete(f"{DRIVERS}/{driver_id}")

    car = client.get(f"/v1/cars/{car_id}")
    assert car.status_code == 200
    assert car.json()["driverId"] == driver_id
