# tests/test_ignition.py

import pytest
from fastapi.testclient import TestClient

from catalog_service.ignition import (
    ENGINES,
    EngineVariant,
    IgnitionStatus,
    Manufacturer,
    ignite,
    start_car,
)


def test_ignite_requires_matching_manufacturer():
    assert ignite(Manufacturer.HONDA, Manufacturer.HONDA) is IgnitionStatus.STARTED
    assert ignite(Manufacturer.HONDA, Manufacturer.FORD) is IgnitionStatus.FAILED_TO_START


def test_status_descriptions():
    assert IgnitionStatus.STARTED.description == "Car started successfully"
    assert IgnitionStatus.FAILED_TO_START.description == "Could not start the car"


def test_engine_table():
    assert set(ENGINES) == set(EngineVariant)
    turbo = ENGINES[EngineVariant.TURBO]
    assert (turbo.model, turbo.horsepower, turbo.cylinders, turbo.displacement) == ("XPTO_1", 180, 4, 1.5)
    assert ENGINES[EngineVariant.ELECTRIC].cylinders == 3
    assert ENGINES[EngineVariant.ASPIRATED].displacement == 2.0


@pytest.mark.parametrize("variant", list(EngineVariant))
def test_engine_does_not_change_outcome(variant):
    assert start_car(variant, Manufacturer.HONDA).status is IgnitionStatus.STARTED
    assert start_car(variant.value, Manufacturer.TOYOTA).status is IgnitionStatus.FAILED_TO_START


def test_start_car_reports_engine():
    outcome = start_car("electric", Manufacturer.HONDA)
    assert outcome.engine is ENGINES[EngineVariant.ELECTRIC]
    assert outcome.car_model == "HR-V"
    assert outcome.manufacturer is Manufacturer.HONDA


def test_start_endpoint(client: TestClient):
    response = client.post("/factory-tests/aspirated", json={"manufacturer": "HONDA"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "STARTED"
    assert body["description"] == "Car started successfully"
    assert body["engine"]["variant"] == "aspirated"
    assert body["engine"]["horsepower"] == 120


def test_start_endpoint_wrong_key(client: TestClient):
    response = client.post("/factory-tests/electric", json={"manufacturer": "FORD", "key_type": "PRESENCE"})
    assert response.status_code == 200
    assert response.json()["status"] == "FAILED_TO_START"


def test_default_engine_is_turbo(client: TestClient):
    response = client.post("/factory-tests/", json={"manufacturer": "HONDA"})
    assert response.status_code == 200
    assert response.json()["engine"]["variant"] == "turbo"


def test_unknown_engine_is_rejected(client: TestClient):
    response = client.post("/factory-tests/diesel", json={"manufacturer": "HONDA"})
    assert response.status_code == 400


def test_list_engines(client: TestClient):
    response = client.get("/factory-tests/engines")
    assert response.status_code == 200
    assert {engine["variant"] for engine in response.json()} == {"aspirated", "electric", "turbo"}
