"""Serialization of room conditions into DynamoDB attributes and the single write."""

from __future__ import annotations

import decimal
import logging
from decimal import Decimal
from typing import Any, Dict

from boto3.dynamodb.types import TypeSerializer

from app.schemas import RoomCondition
from datastore.dynamodb import RoomConditionTable
from datastore.mock_dynamodb import AttributeMap
from errors import SerializationError

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()


def _to_dynamodb_value(value: Any) -> Any:
    # TypeSerializer refuses float; go through str to keep the printed value.
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def serialize_room_condition(record: RoomCondition) -> AttributeMap:
    """Convert ``record`` into DynamoDB's native ``{"name": {"S": ...}}`` map."""
    plain: Dict[str, Any] = record.model_dump()
    try:
        return {
            key: _serializer.serialize(_to_dynamodb_value(value))
            for key, value in plain.items()
        }
    except (TypeError, ValueError, decimal.DecimalException) as exc:
        raise SerializationError(f"Got error marshalling item: {exc}") from exc


class RoomConditionPersister:
    """Writes each room condition with exactly one unconditional put."""

    def __init__(self, table: RoomConditionTable) -> None:
        self.table = table

    def persist(self, record: RoomCondition) -> AttributeMap:
        item = serialize_room_condition(record)
        self.table.put_item(item)
        logger.info(
            "Stored room condition",
            extra={
                "step": "persist",
                "record_id": record.record_id,
                "table_name": self.table.name,
            },
        )
        return item
