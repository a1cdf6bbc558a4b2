from __future__ import annotations

import random

from sqlalchemy import func, select

from app.core.object_id import is_valid_object_id
from app.db.models import User
from scripts import seed_users as su


def test_generate_users_ages_within_range():
    users = su.generate_users(500, random.Random(7))
    assert len(users) == 500
    ages = [u["age"] for u in users]
    assert min(ages) >= su.MIN_SEED_AGE
    assert max(ages) <= su.MAX_SEED_AGE
    assert len({u["email"] for u in users}) == 500


def test_generate_users_is_reproducible_with_seed():
    assert su.generate_users(10, random.Random(1)) == su.generate_users(10, random.Random(1))


def test_seed_users_replaces_existing_rows(sqlite_users_db, seed_user):
    seed_user(user_id="507f1f77bcf86cd799439012", name="Bo", email="bo@x.com", age=30)

    inserted = su.seed_users(sqlite_users_db, 50, random.Random(3))
    assert inserted == 50

    with sqlite_users_db() as db:
        assert db.execute(select(func.count()).select_from(User)).scalar_one() == 50
        assert db.get(User, "507f1f77bcf86cd799439012") is None
        ids = db.execute(select(User.id)).scalars().all()
    assert all(is_valid_object_id(i) for i in ids)


def test_main_refuses_prod_without_force(monkeypatch, capsys):
    monkeypatch.setenv("APP_ENV", "prod")
    assert su.main(["--count", "1"]) == 1
    assert "APP_ENV" in capsys.readouterr().err


def test_main_rejects_negative_count(capsys):
    assert su.main(["--count", "-1"]) == 1


def test_main_seeds_configured_database(tmp_path, monkeypatch, capsys):
    db_path = tmp_path / "seed.db"
    monkeypatch.setattr(su.settings, "database_url", f"sqlite+pysqlite:///{db_path}", raising=False)

    assert su.main(["--count", "5", "--seed", "42"]) == 0
    assert "Inserted 5 users" in capsys.readouterr().out
    assert db_path.exists()
