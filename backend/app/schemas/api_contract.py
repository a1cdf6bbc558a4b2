from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class DatabaseHealth(BaseModel):
    reachable: bool = False
    error: str | None = None


class HealthResponse(BaseModel):
    app: str
    version: str
    status: Literal["ok", "degraded"] | str = Field(
        ..., description="Overall health status"
    )
    time_utc: str
    app_env: str
    database: DatabaseHealth | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="24-character hexadecimal identifier")
    name: str | None = None
    email: str | None = None
    age: int | None = None


class ErrorResponse(BaseModel):
    error: str
    details: dict[str, Any] | None = None
