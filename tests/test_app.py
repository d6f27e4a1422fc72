from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.api import get_collector
from app.main import create_app
from conftest import json_transport, remo_client, remo_device
from datastore.mock_dynamodb import MockDynamoDBTable
from services.collector import Collector
from services.persister import RoomConditionPersister
from services.transformer import load_zone


@pytest.fixture
def table() -> MockDynamoDBTable:
    return MockDynamoDBTable(name="room_conditions")


def _client_with(collector: Collector) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_collector] = lambda: collector
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_client(table: MockDynamoDBTable) -> Iterator[TestClient]:
    collector = Collector(
        reader=remo_client(json_transport([remo_device()])),
        persister=RoomConditionPersister(table),
        zone=load_zone(),
    )
    yield from _client_with(collector)


@pytest.fixture
def failing_api_client(table: MockDynamoDBTable) -> Iterator[TestClient]:
    collector = Collector(
        reader=remo_client(json_transport([])),
        persister=RoomConditionPersister(table),
        zone=load_zone(),
    )
    yield from _client_with(collector)


def test_invocation_stores_record(api_client: TestClient, table: MockDynamoDBTable) -> None:
    response = api_client.post("/invocations")

    assert response.status_code == 200
    payload = response.json()
    assert payload["exit_code"] == 0
    assert payload["error"] is None
    stored = table.get_item(payload["record_id"])
    assert stored is not None
    assert stored["device_names"] == {"S": "Remo-1"}


def test_failed_invocation_returns_bad_gateway(
    failing_api_client: TestClient, table: MockDynamoDBTable
) -> None:
    response = failing_api_client.post("/invocations")

    assert response.status_code == 502
    assert response.json() == {"exit_code": 1, "error": "no device found", "record_id": None}
    assert table.scan() == []


def test_missing_configuration_returns_service_unavailable() -> None:
    with TestClient(create_app()) as client:
        response = client.post("/invocations")

    assert response.status_code == 503
    assert "ACCESS_KEY" in response.json()["detail"]


def test_healthcheck(api_client: TestClient) -> None:
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
