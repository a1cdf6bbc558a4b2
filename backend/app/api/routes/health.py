from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.db.capabilities import check_database
from app.schemas.api_contract import DatabaseHealth, HealthResponse

router = APIRouter()

APP_NAME = "User Lookup Service"
APP_VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    db_status = check_database(getattr(request.app.state, "engine", None))
    return {
        "app": APP_NAME,
        "version": APP_VERSION,
        "status": "ok" if db_status.reachable else "degraded",
        "time_utc": datetime.now(timezone.utc).isoformat(),
        "app_env": request.app.state.settings.app_env,
        "database": DatabaseHealth(**db_status.as_dict()),
    }
