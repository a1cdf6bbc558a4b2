#!/usr/bin/env python3
"""
Reset the `users` collection and fill it with sample users.
Ages are uniform in 18..67, so roughly a third of the users are hidden by the
age gate on GET /users/{id}. Prints the number of inserted users on success.
"""
from __future__ import annotations

import argparse
import os
import random
import sys
from pathlib import Path

from sqlalchemy.orm import Session, sessionmaker

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from app.core.config import settings  # noqa: E402
from app.crud.users import delete_all_users, insert_users  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.models import User  # noqa: E402,F401  (registers the table)
from app.db.session import build_engine, build_session_factory  # noqa: E402

MIN_SEED_AGE = 18
MAX_SEED_AGE = 67

FIRST_NAMES = [
    "Ana", "Bo", "Carmen", "Dmitri", "Elif", "Femi", "Grace", "Hiro",
    "Ines", "Jonas", "Kavya", "Luca", "Mei", "Nadia", "Omar", "Priya",
]
LAST_NAMES = [
    "Almeida", "Becker", "Chen", "Dubois", "Evans", "Fischer", "Garcia",
    "Haddad", "Ito", "Jensen", "Kowalski", "Lopez", "Murphy", "Novak",
]
EMAIL_DOMAINS = ["example.com", "example.org", "example.net"]


def generate_users(count: int, rng: random.Random) -> list[dict[str, object]]:
    users: list[dict[str, object]] = []
    for i in range(count):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        users.append(
            {
                "name": f"{first} {last}",
                "email": f"{first.lower()}.{last.lower()}{i}@{rng.choice(EMAIL_DOMAINS)}",
                "age": rng.randint(MIN_SEED_AGE, MAX_SEED_AGE),
            }
        )
    return users


def seed_users(session_factory: sessionmaker, count: int, rng: random.Random) -> int:
    db: Session = session_factory()
    try:
        delete_all_users(db)
        rows = insert_users(db, generate_users(count, rng))
        db.commit()
        return len(rows)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replace all users with generated sample users.")
    parser.add_argument("--count", type=int, default=settings.seed_user_count, help="Number of users to insert")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("--force", action="store_true", help="Allow running outside APP_ENV=dev/test")
    args = parser.parse_args(argv)

    app_env = (os.getenv("APP_ENV") or settings.app_env or "dev").strip().lower()
    if app_env not in {"dev", "test"} and not args.force:
        print("[seed_users] APP_ENV must be 'dev' or 'test' (pass --force to override).", file=sys.stderr)
        return 1
    if args.count < 0:
        print("[seed_users] --count must be >= 0.", file=sys.stderr)
        return 1

    engine = build_engine(settings.database_url)
    try:
        Base.metadata.create_all(bind=engine)
        inserted = seed_users(build_session_factory(engine), args.count, random.Random(args.seed))
    except Exception as exc:
        print(f"[seed_users] Failed: {type(exc).__name__}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()

    print(f"Inserted {inserted} users")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
