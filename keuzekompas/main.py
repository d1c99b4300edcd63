"""FastAPI entrypoint for the module catalog."""

from __future__ import annotations

import logging
import re
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from time import perf_counter
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from keuzekompas.auth.routes import router as auth_router
from keuzekompas.core.config import get_settings
from keuzekompas.core.logging import configure_logging, request_id_var
from keuzekompas.db import mongo
from keuzekompas.features.favorites.endpoints import router as favorites_router
from keuzekompas.features.modules.endpoints import router as modules_router
from keuzekompas.features.users.endpoints import router as users_router

_settings = get_settings()
_START_TIME = datetime.now(timezone.utc)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(_settings.log_level)
    # Production guardrails (fail fast with clear logs)
    if _settings.is_production and not _settings.jwt_secret:
        raise RuntimeError("JWT_SECRET must be set in production.")
    try:
        await mongo.ensure_indexes()
    except PyMongoError:
        logger.exception("Could not ensure indexes; retrying on first database use")
    logger.info("%s started (env=%s)", _settings.app_name, _settings.env)
    yield
    mongo.close_client()


app = FastAPI(title=_settings.app_name, lifespan=lifespan)


# ------------------------
# CORS Setup
# ------------------------
_LOCAL_ORIGIN_REGEX = re.compile(r"https?://(localhost|127\.0\.0\.1)(:\d+)?", re.I)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allow_origins,
    allow_origin_regex=_LOCAL_ORIGIN_REGEX.pattern,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ------------------------
# Custom Middlewares
# ------------------------
@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    incoming = request.headers.get("X-Request-Id") or request.headers.get("X-Request-ID")
    req_id = incoming or str(uuid.uuid4())
    request.state.request_id = req_id
    token = request_id_var.set(req_id)
    log = logging.getLogger("request")
    t0 = perf_counter()
    try:
        log.info("request.start %s %s", request.method, request.url.path)
        response = await call_next(request)
        dt = int((perf_counter() - t0) * 1000)
        response.headers["X-Request-Id"] = req_id
        log.info("request.end %s %s %s %dms", request.method, request.url.path, response.status_code, dt)
        return response
    finally:
        request_id_var.reset(token)


# ------------------------
# Error mapping
# ------------------------
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": "Validation failed", "errors": errors}),
    )


# ------------------------
# Routers
# ------------------------
app.include_router(auth_router)
app.include_router(modules_router)
app.include_router(favorites_router)
app.include_router(users_router)


# ------------------------
# Meta endpoints
# ------------------------
@app.get("/", tags=["meta"], summary="API Root")
async def root():
    return {
        "name": _settings.app_name,
        "status": "ok",
        "docs": "/docs",
        "health": "/healthz",
    }


async def _database_component() -> Dict[str, Any]:
    try:
        latency = await mongo.ping()
    except PyMongoError as e:
        logger.warning("healthz: database unreachable (%s)", type(e).__name__)
        return {"status": "down", "error": type(e).__name__}
    return {"status": "up", "latency_ms": latency, "name": _settings.mongo_db}


@app.get("/healthz", tags=["meta"], summary="Liveness / readiness probe")
async def healthz() -> Dict[str, Any]:
    database = await _database_component()
    return {
        "status": "ok" if database["status"] == "up" else "degraded",
        "version": _settings.app_version,
        "env": _settings.env,
        "uptime_seconds": round((datetime.now(timezone.utc) - _START_TIME).total_seconds(), 2),
        "components": {"database": database},
    }
