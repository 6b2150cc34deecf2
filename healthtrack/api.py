# -*- coding: utf-8 -*-
"""
Health tracking API.

Daily steps, meal logging and nutrition goals, with history, statistics and
goal progress computed by the aggregation engine.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .config import settings
from .errors import HealthTrackError
from .meals.api import router as meals_router
from .nutrition.api import router as nutrition_router
from .steps.api import router as steps_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="healthtrack",
    description="Steps, meals and nutrition goals with calendar-correct history and statistics",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# TestClient without a context manager skips startup events.
init_app_db(settings.app_db_path)


@app.exception_handler(HealthTrackError)
async def _domain_error(request: Request, exc: HealthTrackError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(steps_router)
app.include_router(meals_router)
app.include_router(nutrition_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}
