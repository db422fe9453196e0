from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from uberapp_api.app.core.db import get_store
from uberapp_api.app.main import app


class _ScopeRecorder:
    def __init__(self, store) -> None:
        self.store = store
        self.opened = 0
        self.closed = 0

    def dependency(self):
        self.opened += 1
        try:
            yield self.store
        finally:
            self.closed += 1


@pytest.fixture
def recorder(store):
    recorder = _ScopeRecorder(store)
    app.dependency_overrides[get_store] = recorder.dependency
    yield recorder
    app.dependency_overrides.clear()


def test_store_scope_released_on_every_path(recorder, car_payload: dict) -> None:
    client = TestClient(app)

    created = client.post("/v1/cars", json=car_payload)
    invalid = client.post("/v1/cars", json={**car_payload, "model": ""})
    missing = client.get(f"/v1/cars/{uuid.uuid4()}")
    malformed = client.delete("/v1/cars/nope")
    rejected_patch = client.patch(f"/v1/cars/{created.json()['id']}", json={"validRideTypes": "X"})

    assert [r.status_code for r in (created, invalid, missing, malformed, rejected_patch)] == [201, 400, 404, 400, 400]
    assert recorder.opened == 5
    assert recorder.closed == recorder.opened
