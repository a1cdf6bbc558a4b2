from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes.health import APP_NAME, APP_VERSION
from app.api.routes.health import router as health_router
from app.api.routes.users import router as users_router
from app.core.config import Settings, settings as default_settings
from app.core.errors import INTERNAL_ERROR, err
from app.core.logging_utils import configure_logging
from app.db.session import build_engine, build_session_factory
from app.middleware.security import RequestIdMiddleware, SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


def _sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    sanitized: list[dict[str, Any]] = []
    for entry in errors:
        entry = dict(entry)
        ctx = entry.get("ctx")
        if isinstance(ctx, dict):
            safe_ctx: dict[str, Any] = {}
            for key, value in ctx.items():
                try:
                    json.dumps(value)
                    safe_ctx[key] = value
                except TypeError:
                    safe_ctx[key] = repr(value)
            entry["ctx"] = safe_ctx
        sanitized.append(entry)
    return sanitized


def _detail_message(detail: Any) -> str:
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict) and isinstance(detail.get("error"), str):
        return detail["error"]
    return str(detail)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def _clean_origin(value: str) -> str:
    cleaned = value.strip()
    while cleaned.endswith("/") and cleaned != "/":
        cleaned = cleaned[:-1]
    return cleaned


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Application factory.
    - The store engine is built once here and shared by every request via `app.state`.
    - Tests pass their own engine (or override `get_db`).
    """
    settings = settings or default_settings
    configure_logging()

    app = FastAPI(title=APP_NAME, version=APP_VERSION)
    app.state.settings = settings
    app.state.engine = engine if engine is not None else build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(SecurityHeadersMiddleware)

    # ---- Request tracing ----
    @app.middleware("http")
    async def request_trace(request: Request, call_next):
        request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
        status_code = 500
        t0 = time.time()
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            log = {
                "event": "request_done",
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": status_code,
                "ms_total": int((time.time() - t0) * 1000),
            }
            print(json.dumps(log, ensure_ascii=False))

        return response

    # ---- Exception handlers (unified {"error": ...} JSON) ----
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return err(
            _detail_message(exc.detail),
            exc.status_code,
            headers={"x-request-id": _request_id(request)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = jsonable_encoder({"errors": _sanitize_validation_errors(exc.errors())})
        return err(
            "Request validation failed.",
            422,
            details=details,
            headers={"x-request-id": _request_id(request)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        rid = _request_id(request)
        logger.error("unhandled exception request_id=%s error=%r", rid, exc)
        return err(INTERNAL_ERROR, 500, headers={"x-request-id": rid})

    # ---- CORS ----
    origins = [_clean_origin(o) for o in (settings.cors_origin or "").split(",") if _clean_origin(o)]
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Outermost, so every response (errors included) carries x-request-id.
    app.add_middleware(RequestIdMiddleware)

    # ---- Routers ----
    app.include_router(health_router, tags=["health"])
    app.include_router(users_router, tags=["users"])

    return app


app = create_app()
