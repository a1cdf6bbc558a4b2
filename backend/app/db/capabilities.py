from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


@dataclass
class DatabaseStatus:
    reachable: bool = False
    error: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


def check_database(engine: Engine | None) -> DatabaseStatus:
    """
    Run `SELECT 1` against the store.
    Only the exception class name is reported; the message may carry the URL.
    """
    if engine is None:
        return DatabaseStatus(reachable=False, error="engine unavailable")
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as exc:
        logger.warning("database health check failed: %s", exc)
        return DatabaseStatus(reachable=False, error=type(exc).__name__)
    return DatabaseStatus(reachable=True)
