from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from datastore.mock_dynamodb import AttributeMap, MockDynamoDBTable
from errors import ConfigurationError, StoreWriteError
from settings import get_settings


class RoomConditionTable(Protocol):
    name: str

    def put_item(self, item: AttributeMap) -> None:
        ...


class DynamoDBTable:
    """Thin wrapper around the low-level DynamoDB client for a single table."""

    def __init__(self, name: str, client: Optional[Any] = None) -> None:
        self.name = name
        self._client = client or boto3.client("dynamodb")

    def put_item(self, item: AttributeMap) -> None:
        """Unconditional put; an existing item with the same key is replaced."""
        try:
            self._client.put_item(TableName=self.name, Item=item)
        except ClientError as exc:
            error: Dict[str, Any] = exc.response.get("Error", {})
            raise StoreWriteError(
                f"put_item on {self.name!r} failed: {error.get('Message') or exc}",
                error_code=error.get("Code"),
            ) from exc
        except BotoCoreError as exc:
            raise StoreWriteError(f"put_item on {self.name!r} failed: {exc}") from exc


@lru_cache
def build_default_table(
    name: Optional[str] = None,
    backend: Optional[str] = None,
) -> Union[DynamoDBTable, MockDynamoDBTable]:
    settings = get_settings()
    table_name = settings.table_name if name is None else name
    store = settings.store_backend if backend is None else backend
    if store == "mock":
        path = settings.table_persistence_path
        return MockDynamoDBTable(
            name=table_name, persistence_path=Path(path) if path else None
        )
    if store == "dynamodb":
        try:
            return DynamoDBTable(name=table_name)
        except BotoCoreError as exc:
            raise ConfigurationError(f"cannot create DynamoDB client: {exc}") from exc
    raise ConfigurationError(f"unknown store backend {store!r}")
