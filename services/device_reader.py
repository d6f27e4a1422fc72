"""Client for the Nature Remo device listing endpoint."""

from __future__ import annotations

import json
import logging
from datetime import timezone
from typing import Optional

import httpx
from pydantic import ValidationError

from errors import ConfigurationError, NetworkError, NoDeviceFoundError, ParseError, UpstreamError
from models.devices import Device, DeviceList
from models.records import DeviceReading

DEVICES_URL = "https://api.nature.global/1/devices"

logger = logging.getLogger(__name__)


class NatureRemoClient:
    """Fetches device state with a bearer credential.

    Every failure is raised as a ``CollectorError`` subclass; nothing is
    retried.
    """

    def __init__(
        self,
        access_key: str,
        base_url: str = DEVICES_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._access_key = access_key
        self._url = base_url
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "NatureRemoClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_devices(self) -> list[Device]:
        if not self._access_key or not self._access_key.strip():
            raise ConfigurationError("no ACCESS_KEY provided for nature remo")

        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._access_key}",
        }
        try:
            response = self._client.get(self._url, headers=headers)
        except (httpx.RequestError, UnicodeEncodeError) as exc:
            raise NetworkError(f"cannot get response from remo: {exc}") from exc

        if not response.is_success:
            raise UpstreamError(
                f"nature remo returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseError("failed to decode device response as JSON") from exc

        try:
            devices = DeviceList.validate_python(payload)
        except ValidationError as exc:
            raise ParseError(
                f"device response does not match the expected schema "
                f"({exc.error_count()} errors)"
            ) from exc

        logger.debug("Fetched %d device(s)", len(devices), extra={"step": "fetch"})
        return devices

    def read_first_device(self) -> DeviceReading:
        """Return the newest readings of the first listed device."""
        devices = self.fetch_devices()
        if not devices:
            raise NoDeviceFoundError("no device found")

        device = devices[0]
        events = device.newest_events
        return DeviceReading(
            name=device.name,
            humid=events.hu.val,
            humid_created_at=events.hu.created_at.astimezone(timezone.utc),
            illuminance=events.il.val,
            illuminance_created_at=events.il.created_at.astimezone(timezone.utc),
            temperature=events.te.val,
            temperature_created_at=events.te.created_at.astimezone(timezone.utc),
        )
