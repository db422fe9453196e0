from __future__ import annotations

import os

# Settings are read at import time; keep hashing cheap and the secret fixed.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret")

import mongomock  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from uberapp_api.app.core.db import MongoStore, get_store  # noqa: E402
from uberapp_api.app.main import app  # noqa: E402


@pytest.fixture
def database():
    return mongomock.MongoClient()["uberapp_test"]


@pytest.fixture
def store(database) -> MongoStore:
    return MongoStore(database)


@pytest.fixture
def client(store):
    def _store_override():
        yield store

    app.dependency_overrides[get_store] = _store_override
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def car_payload() -> dict:
    return {
        "make": "vw",
        "model": "beetle",
        "license": "5PVXXX",
        "carType": "Sedan",
        "maxPassengers": 4,
        "color": "white",
        "validRideTypes": "ECONOMY",
    }


@pytest.fixture
def passenger_payload() -> dict:
    return {
        "firstName": "Hector",
        "lastName": "Guo",
        "emailAddress": "hectorguo@live.com",
        "password": "123456",
        "addressLine1": "100N Rd",
        "addressLine2": "",
        "city": "Mountain View",
        "state": "CA",
        "zip": "94053",
        "phoneNumber": "666-777-9999",
    }


@pytest.fixture
def driver_payload() -> dict:
    return {
        "firstName": "Lin",
        "lastName": "Zhai",
        "emailAddress": "lzhai@example.com",
        "password": "s3cret!",
        "city": "Sunnyvale",
        "state": "CA",
        "drivingLicense": "D1234567",
        "licensedState": "CA",
    }


@pytest.fixture
def ride_payload() -> dict:
    return {
        "rideType": "ECONOMY",
        "startPointLat": 37.4107,
        "startPointLong": -122.0598,
        "endPointLat": 37.3876,
        "endPointLong": -122.0819,
    }
