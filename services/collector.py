"""Orchestration of one collection run: fetch, transform, persist."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Callable, Optional
from zoneinfo import ZoneInfo

from app.schemas import InvocationResult
from datastore.dynamodb import build_default_table
from errors import CollectorError, ConfigurationError
from services.device_reader import NatureRemoClient
from services.persister import RoomConditionPersister
from services.transformer import LOCALE, build_room_condition, load_zone
from settings import get_settings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Collector:
    """Runs reader, transformer and persister in strict sequence."""

    def __init__(
        self,
        reader: NatureRemoClient,
        persister: RoomConditionPersister,
        zone: ZoneInfo,
        clock: Clock = _utcnow,
    ) -> None:
        self.reader = reader
        self.persister = persister
        self.zone = zone
        self.clock = clock

    def invoke(self, event: Optional[Any] = None) -> InvocationResult:
        try:
            reading = self.reader.read_first_device()
            record = build_room_condition(reading, now=self.clock(), zone=self.zone)
            self.persister.persist(record)
        except CollectorError as exc:
            logger.error(
                "Collection failed: %s",
                exc,
                exc_info=exc.__cause__ is not None,
                extra={
                    "reason": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                    "error_code": getattr(exc, "error_code", None),
                    "exit_code": 1,
                },
            )
            return InvocationResult.failure(str(exc))

        logger.info(
            "Collection succeeded",
            extra={
                "device_name": record.device_names,
                "record_id": record.record_id,
                "exit_code": 0,
            },
        )
        return InvocationResult.success(record.record_id)

    def close(self) -> None:
        self.reader.close()


@lru_cache
def build_default_collector() -> Collector:
    """Wire a collector from settings, failing fast on bad configuration."""
    settings = get_settings()
    if not settings.access_key:
        raise ConfigurationError("no ACCESS_KEY provided for nature remo")
    zone = load_zone(LOCALE)
    table = build_default_table()
    reader = NatureRemoClient(settings.access_key, timeout=settings.request_timeout)
    return Collector(reader=reader, persister=RoomConditionPersister(table), zone=zone)
