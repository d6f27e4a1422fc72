from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.collector import build_default_collector


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    try:
        yield
    finally:
        if build_default_collector.cache_info().currsize:
            build_default_collector().close()
        build_default_collector.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Room Condition Collector",
        description="Polls a Nature Remo device and stores its latest room conditions.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
