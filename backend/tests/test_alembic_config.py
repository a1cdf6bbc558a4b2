from __future__ import annotations

import configparser
import importlib.util
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1]


def test_alembic_script_location_resolves() -> None:
    ini_path = BACKEND_ROOT / "alembic.ini"
    assert ini_path.exists()

    parser = configparser.ConfigParser()
    parser["DEFAULT"]["here"] = str(ini_path.parent)
    assert parser.read(ini_path), "alembic.ini could not be read"

    script_location = parser.get("alembic", "script_location", fallback="").strip()
    assert script_location, "script_location missing in alembic.ini"

    script_dir = Path(script_location)
    assert script_dir.exists(), f"script_location path not found: {script_dir}"
    assert (script_dir / "versions").exists(), f"versions dir not found under {script_dir}"


def test_users_migration_is_the_single_head() -> None:
    versions = BACKEND_ROOT / "alembic" / "versions"
    revisions = {}
    for path in versions.glob("*.py"):
        spec = importlib.util.spec_from_file_location(path.stem, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        revisions[module.revision] = module.down_revision

    assert "0001_create_users" in revisions
    referenced = {down for down in revisions.values() if down}
    heads = [rev for rev in revisions if rev not in referenced]
    assert heads, "no alembic head found"
    assert len(heads) == 1, f"multiple alembic heads: {heads}"
