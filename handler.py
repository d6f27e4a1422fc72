"""Function entry point for scheduled invocations."""

from __future__ import annotations

import logging
from typing import Any, Dict

from app.schemas import InvocationResult
from errors import ConfigurationError
from logging_config import configure_logging
from services.collector import build_default_collector

logger = logging.getLogger(__name__)


def lambda_handler(event: Any, context: Any) -> Dict[str, Any]:
    configure_logging()
    try:
        collector = build_default_collector()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc, extra={"step": "startup", "exit_code": 1})
        return InvocationResult.failure(str(exc)).model_dump()
    return collector.invoke(event).model_dump()
