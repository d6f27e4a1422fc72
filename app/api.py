"""HTTP route definitions for triggering collections."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.schemas import InvocationResult
from errors import ConfigurationError
from services.collector import Collector, build_default_collector

router = APIRouter()

logger = logging.getLogger(__name__)


def get_collector() -> Collector:
    try:
        return build_default_collector()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc, extra={"step": "startup"})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc


@router.post(
    "/invocations",
    response_model=InvocationResult,
    summary="Run one collection and store the resulting room condition.",
)
def invoke_collection(
    response: Response,
    collector: Collector = Depends(get_collector),
) -> InvocationResult:
    result = collector.invoke()
    if result.exit_code != 0:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    return result


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
