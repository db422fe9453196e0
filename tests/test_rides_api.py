from __future__ import annotations

import uuid

RIDES = "/v1/rides"


def test_request_ride_fills_defaults(client, ride_payload: dict) -> None:
    response = client.post(RIDES, json=ride_payload)

    assert response.status_code == 201
    ride = response.json()
    assert ride["status"] == "REQUESTED"
    assert isinstance(ride["requestTime"], int) and ride["requestTime"] > 0
    assert ride["startPointLat"] == ride_payload["startPointLat"]


def test_request_ride_keeps_client_values(client, ride_payload: dict) -> None:
    ride_payload.update(requestTime=1479500000000, status="AWAITING_DRIVER", fare=12.5)

    ride = client.post(RIDES, json=ride_payload).json()

    assert ride["requestTime"] == 1479500000000
    assert ride["status"] == "AWAITING_DRIVER"
    assert ride["fare"] == 12.5


def test_ride_validation(client, ride_payload: dict) -> None:
    bad_type = client.post(RIDES, json={**ride_payload, "rideType": "SHUTTLE"})
    bad_point = client.post(RIDES, json={**ride_payload, "endPointLong": 200.0})
    bad_ref = client.post(RIDES, json={**ride_payload, "driverId": "driver-7"})

    assert bad_type.status_code == 400
    assert "rideType" in bad_type.json()["detail"]
    assert bad_point.status_code == 400
    assert "endPointLong" in bad_point.json()["detail"]
    assert bad_ref.status_code == 400
    assert "driverId" in bad_ref.json()["detail"]


def test_ride_lifecycle(client, ride_payload: dict) -> None:
    ride_id = client.post(RIDES, json=ride_payload).json()["id"]
    driver_id = str(uuid.uuid4())

    assigned = client.patch(f"{RIDES}/{ride_id}", json={"status": "DRIVER_ASSIGNED", "driverId": driver_id})
    closed = client.patch(f"{RIDES}/{ride_id}", json={"status": "CLOSED", "dropOffTime": 1479500900000})
    rejected = client.patch(f"{RIDES}/{ride_id}", json={"status": "TELEPORTED"})

    assert assigned.json() == f"Ride: {ride_id} updated"
    assert closed.status_code == 200
    assert rejected.status_code == 400
    ride = client.get(f"{RIDES}/{ride_id}").json()
    assert ride["status"] == "CLOSED"
    assert ride["driverId"] == driver_id
    assert ride["dropOffTime"] == 1479500900000

    assert client.delete(f"{RIDES}/{ride_id}").status_code == 200
    assert client.get(RIDES).json() == []


def test_list_rides_newest_first(client, ride_payload: dict) -> None:
    for request_time in (3, 1, 2):
        client.post(RIDES, json={**ride_payload, "requestTime": request_time})

    rides = client.get(RIDES, params={"sort": "requestTime", "sortOrder": "desc"}).json()

    assert [ride["requestTime"] for ride in rides] == [3, 2, 1]
