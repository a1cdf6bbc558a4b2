import logging
import os
from pathlib import Path

os.environ["APP_ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.log_leak_scan import scan_file, format_report
from app.crud.users import insert_users
from app.db.base import Base
from app.db.models import User
from app.db.session import get_db
from app.main import app


@pytest.fixture(autouse=True)
def _set_default_test_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", os.getenv("APP_ENV", "test") or "test")


@pytest.fixture(scope="session", autouse=True)
def _capture_logs_for_leak_scan():
    base_dir = Path(__file__).resolve().parents[1]
    log_dir = base_dir / ".pytest_logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "pytest.log"

    handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)

    try:
        yield log_path
    finally:
        root_logger.removeHandler(handler)
        handler.close()
        violations = scan_file(log_path)
        if violations:
            pytest.fail(format_report(violations))


@pytest.fixture()
def sqlite_users_db():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True)
    Base.metadata.create_all(bind=engine, tables=[User.__table__])

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield SessionLocal
    finally:
        app.dependency_overrides.pop(get_db, None)
        Base.metadata.drop_all(bind=engine, tables=[User.__table__])
        engine.dispose()


@pytest.fixture()
def seed_user(sqlite_users_db):
    def _seed(*, user_id: str, name: str, email: str, age: int) -> None:
        with sqlite_users_db() as db:
            insert_users(db, [{"id": user_id, "name": name, "email": email, "age": age}])
            db.commit()

    return _seed
