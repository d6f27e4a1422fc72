from __future__ import annotations
import copy
import json
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

from errors import StoreWriteError

AttributeMap = Dict[str, Dict[str, Any]]

logger = logging.getLogger(__name__)


class MockDynamoDBTable:
    """In-memory stand-in for a DynamoDB table speaking low-level attribute maps."""

    def __init__(
        self,
        name: str,
        persistence_path: Optional[Path] = None,
        key_attribute: str = "record_id",
    ) -> None:
        self.name = name
        self.key_attribute = key_attribute
        self._items: Dict[str, AttributeMap] = {}
        self.persistence_path = persistence_path
        self._lock = Lock()
        if persistence_path:
            persistence_path.parent.mkdir(parents=True, exist_ok=True)
            self._load_from_disk()

    def put_item(self, item: AttributeMap) -> None:
        key = self._key_of(item)
        with self._lock:
            updated = dict(self._items)
            updated[key] = copy.deepcopy(item)
            self._persist(updated)
            self._items = updated

    def get_item(self, key: str) -> Optional[AttributeMap]:
        with self._lock:
            item = self._items.get(key)
            if item is None:
                return None
            return copy.deepcopy(item)

    def scan(self) -> list[AttributeMap]:
        """Return deep copies of all stored items."""

        with self._lock:
            return [copy.deepcopy(item) for item in self._items.values()]

    def _key_of(self, item: AttributeMap) -> str:
        attribute = item.get(self.key_attribute)
        if not attribute or "S" not in attribute:
            raise StoreWriteError(
                f"item is missing string key attribute {self.key_attribute!r}",
                error_code="ValidationException",
            )
        return attribute["S"]

    def _persist(self, items: Dict[str, AttributeMap]) -> None:
        if not self.persistence_path:
            return
        try:
            self.persistence_path.write_text(
                json.dumps(items, indent=2, sort_keys=True)
            )
        except OSError as exc:
            raise StoreWriteError(
                f"cannot write table file {self.persistence_path}: {exc}"
            ) from exc

    def _load_from_disk(self) -> None:
        if not self.persistence_path or not self.persistence_path.exists():
            return

        try:
            raw = self.persistence_path.read_text() or "{}"
            data = json.loads(raw)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(
                "Ignoring unreadable table file %s: %s",
                self.persistence_path,
                exc,
                extra={"table_name": self.name},
            )
            data = {}

        self._items.update(data)
