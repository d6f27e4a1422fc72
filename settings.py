from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_ACCESS_KEY_ENV = "ACCESS_KEY"
_TABLE_NAME_ENV = "ROOM_CONDITIONS_TABLE_NAME"
_STORE_BACKEND_ENV = "ROOM_CONDITIONS_STORE"
_TABLE_PATH_ENV = "MOCK_DYNAMODB_PERSISTENCE_PATH"
_TIMEOUT_ENV = "NATURE_REMO_TIMEOUT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

STORE_BACKENDS = ("dynamodb", "mock")


@dataclass(frozen=True)
class Settings:
    access_key: str
    table_name: str
    store_backend: str
    table_persistence_path: Optional[str]
    request_timeout: float
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_timeout(default: float) -> float:
    value = os.getenv(_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_store_backend(default: str) -> str:
    candidate = _read_str_env(_STORE_BACKEND_ENV, default).lower()
    return candidate if candidate in STORE_BACKENDS else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        access_key=_read_str_env(_ACCESS_KEY_ENV, ""),
        table_name=_read_str_env(_TABLE_NAME_ENV, "room_conditions"),
        store_backend=_read_store_backend("dynamodb"),
        table_persistence_path=_read_optional_env(
            _TABLE_PATH_ENV, "./tmp/room_conditions.json"
        ),
        request_timeout=_read_timeout(10.0),
        log_level=_read_log_level("INFO"),
    )
