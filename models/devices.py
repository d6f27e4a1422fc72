"""Pydantic models for the Nature Remo ``/1/devices`` payload."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SensorEvent(_UpstreamModel):
    """Latest reading of a float-valued sensor."""

    val: float
    created_at: AwareDatetime


class HumidityEvent(_UpstreamModel):
    val: int
    created_at: AwareDatetime


class NewestEvents(_UpstreamModel):
    """Envelope keyed by sensor type: humidity, illuminance, temperature."""

    hu: HumidityEvent
    il: SensorEvent
    te: SensorEvent


class DeviceUser(_UpstreamModel):
    id: str
    nickname: Optional[str] = None
    superuser: bool = False


class Device(_UpstreamModel):
    """A single Nature Remo hub as reported by the device listing."""

    name: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    mac_address: Optional[str] = None
    serial_number: Optional[str] = None
    firmware_version: Optional[str] = None
    temperature_offset: Optional[int] = None
    humidity_offset: Optional[int] = None
    users: List[DeviceUser] = Field(default_factory=list)
    newest_events: NewestEvents


DeviceList = TypeAdapter(List[Device])
