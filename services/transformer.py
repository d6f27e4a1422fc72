"""Pure mapping from a device reading to a persisted room condition."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.schemas import RoomCondition
from errors import ConfigurationError
from models.records import DeviceReading

LOCALE = "Asia/Tokyo"


def load_zone(name: str = LOCALE) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"cannot load time zone {name!r}") from exc


def format_timestamp(value: datetime, zone: ZoneInfo) -> str:
    """Render ``value`` in ``zone`` as ISO 8601 with offset, second precision.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(zone).isoformat(timespec="seconds")


def build_room_condition(
    reading: DeviceReading,
    now: datetime,
    zone: ZoneInfo,
    record_id: Optional[str] = None,
) -> RoomCondition:
    return RoomCondition(
        record_id=record_id or str(uuid4()),
        device_names=reading.name,
        created_at=format_timestamp(now, zone),
        humid=reading.humid,
        humid_created_at=format_timestamp(reading.humid_created_at, zone),
        illuminance=reading.illuminance,
        illuminance_created_at=format_timestamp(reading.illuminance_created_at, zone),
        temperature=reading.temperature,
        temperature_created_at=format_timestamp(reading.temperature_created_at, zone),
    )
