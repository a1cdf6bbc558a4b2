# app/crud/users.py
from __future__ import annotations

from typing import Iterable, Mapping

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.core.object_id import normalize_object_id
from app.db.models import User


def find_user_by_id_and_min_age(db: Session, user_id: str, min_age: int) -> User | None:
    """Point lookup: `id == user_id AND age > min_age`. Store errors propagate."""
    return db.execute(
        select(User).where(User.id == user_id, User.age > min_age)
    ).scalar_one_or_none()


def delete_all_users(db: Session) -> int:
    r = db.execute(delete(User))
    return r.rowcount or 0


def insert_users(db: Session, users: Iterable[Mapping[str, object]]) -> list[User]:
    """Ids are optional; supplied ids must be valid and are stored lower-case."""
    rows: list[User] = []
    for u in users:
        values = dict(u)
        if values.get("id") is not None:
            values["id"] = normalize_object_id(values["id"])
        rows.append(User(**values))
    db.add_all(rows)
    db.flush()
    return rows
