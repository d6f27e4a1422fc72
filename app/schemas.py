"""Pydantic schemas for persisted records and invocation results."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RoomCondition(BaseModel):
    """Flattened snapshot of one poll, written once and never updated."""

    record_id: str = Field(..., description="Generated partition key for the item.")
    device_names: str
    created_at: str = Field(..., description="Invocation time in the target zone.")
    humid: int
    humid_created_at: str
    illuminance: float
    illuminance_created_at: str
    temperature: float
    temperature_created_at: str


class InvocationResult(BaseModel):
    """Status returned to the invoker of a collection run."""

    exit_code: int = Field(..., ge=0, le=1, description="0 on success, 1 on failure.")
    error: Optional[str] = None
    record_id: Optional[str] = None

    @classmethod
    def success(cls, record_id: str) -> "InvocationResult":
        return cls(exit_code=0, record_id=record_id)

    @classmethod
    def failure(cls, message: str) -> "InvocationResult":
        return cls(exit_code=1, error=message)
