"""
Entry point for the SLO Computer API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from api.routes import router
from api.routes.common import get_catalog
from config import LOG_FORMAT, settings

logging.basicConfig(
    level=settings.log_level,
    format=LOG_FORMAT,
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # the catalog must be complete before the first lookup
    catalog = get_catalog()
    log.info("Instance catalog ready with %d types", len(catalog))
    yield


app = FastAPI(
    title="SLO Computer",
    description="Burn-rate and burst credit alert threshold recommendations.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


def serve(host: str | None = None, port: int | None = None) -> None:
    uvicorn.run(
        "main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    serve()
