"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class DeviceReading:
    """Latest sensor values of one device, with each value's own timestamp."""

    name: str
    humid: int
    humid_created_at: datetime
    illuminance: float
    illuminance_created_at: datetime
    temperature: float
    temperature_created_at: datetime
