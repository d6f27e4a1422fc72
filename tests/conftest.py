from __future__ import annotations

from typing import Any, Callable, Iterator, List

import httpx
import pytest

from datastore.dynamodb import build_default_table
from services.collector import build_default_collector
from services.device_reader import NatureRemoClient
from settings import get_settings

_STORE_ENV = (
    "ACCESS_KEY",
    "ROOM_CONDITIONS_TABLE_NAME",
    "ROOM_CONDITIONS_STORE",
    "MOCK_DYNAMODB_PERSISTENCE_PATH",
    "NATURE_REMO_TIMEOUT",
)


def remo_device(name: str = "Remo-1", **overrides: Any) -> dict:
    device = {
        "name": name,
        "id": "0f4f5a3c-device",
        "created_at": "2022-12-01T00:00:00Z",
        "updated_at": "2022-12-31T00:00:00Z",
        "mac_address": "aa:bb:cc:dd:ee:ff",
        "serial_number": "1W320000000000",
        "firmware_version": "Remo/1.10.0",
        "temperature_offset": 0,
        "humidity_offset": 0,
        "users": [{"id": "user-1", "nickname": "owner", "superuser": True}],
        "newest_events": {
            "hu": {"val": 45, "created_at": "2023-01-01T00:00:00Z"},
            "il": {"val": 120.5, "created_at": "2023-01-01T00:00:00Z"},
            "te": {"val": 21.3, "created_at": "2023-01-01T00:00:00Z"},
        },
    }
    device.update(overrides)
    return device


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)


def json_transport(payload: Any, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda _request: httpx.Response(status_code, json=payload))


def remo_client(transport: httpx.BaseTransport, access_key: str = "secret-token") -> NatureRemoClient:
    return NatureRemoClient(access_key, client=httpx.Client(transport=transport))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch) -> Iterator[None]:
    for name in _STORE_ENV:
        monkeypatch.delenv(name, raising=False)
    caches = (get_settings, build_default_table, build_default_collector)
    for cache in caches:
        cache.cache_clear()
    yield
    for cache in caches:
        cache.cache_clear()
