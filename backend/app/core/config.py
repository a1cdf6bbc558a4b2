from __future__ import annotations

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = Field(...)
    cors_origin: str = Field("")
    app_env: str = Field("dev", alias="APP_ENV")
    seed_user_count: int = Field(50, alias="SEED_USER_COUNT")

    @field_validator("database_url", mode="before")
    @classmethod
    def _normalize_database_url(cls, v: object) -> object:
        """
        Accept common Postgres URL forms and normalize to psycopg(v3) for SQLAlchemy.

        - postgres://...            -> postgresql+psycopg://...
        - postgresql://...          -> postgresql+psycopg://...
        - postgresql+psycopg://...  -> keep as-is
        """
        if not isinstance(v, str):
            return v
        v = v.strip()

        if v.startswith("postgresql+psycopg://"):
            return v

        if v.startswith("postgres://"):
            return "postgresql+psycopg://" + v.split("://", 1)[1]

        if v.startswith("postgresql://"):
            return "postgresql+psycopg://" + v.split("://", 1)[1]

        return v

    @model_validator(mode="after")
    def _validate_env(self) -> "Settings":
        env = (self.app_env or "dev").strip().lower()
        if env == "prod" and self.database_url.startswith("sqlite"):
            raise ValueError("SQLite DATABASE_URL cannot be used in production (APP_ENV=prod)")
        return self


settings = Settings()
