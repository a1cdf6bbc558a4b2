# backend/app/db/session.py
from __future__ import annotations

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are handed across Starlette's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """
    FastAPI dependency.
    The session factory is created once in `create_app()` and lives on `app.state`.
    ジェネレータのまま Depends に渡す（contextmanager で包まない）
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
