#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Iterable, Mapping
from urllib.parse import urlparse

KNOWN_APP_ENVS = {"dev", "test", "prod"}


@dataclass
class CheckResult:
    name: str
    ok: bool
    message: str
    warning: bool = False


def format_report(results: Iterable[CheckResult]) -> str:
    lines: list[str] = []
    for res in results:
        status = "WARN" if res.warning else ("OK" if res.ok else "FAIL")
        lines.append(f"[{status}] {res.name}: {res.message}")
    return "\n".join(lines) if lines else "No checks executed."


def validate_env(strict: bool = False, env: Mapping[str, str] | None = None) -> tuple[bool, list[CheckResult]]:
    env_map = dict(os.environ if env is None else env)
    checks: list[CheckResult] = []

    def add(name: str, ok: bool, message: str, *, warning: bool = False) -> None:
        checks.append(CheckResult(name=name, ok=ok, message=message, warning=warning))

    app_env = (env_map.get("APP_ENV") or "dev").strip().lower()
    add(
        "app_env",
        app_env in KNOWN_APP_ENVS,
        f"APP_ENV={app_env} (expected one of {', '.join(sorted(KNOWN_APP_ENVS))})",
    )

    db_url = (env_map.get("DATABASE_URL") or "").strip()
    if not db_url:
        add("database_url", False, "DATABASE_URL is required")
    else:
        # Only scheme and host are echoed; credentials never reach the report.
        parsed = urlparse(db_url)
        ok = bool(parsed.scheme and (parsed.netloc or parsed.path))
        host = parsed.hostname or "<missing>"
        add("database_url", ok, f"scheme={parsed.scheme or '<missing>'} host={host}")
        if parsed.scheme.startswith("sqlite"):
            if app_env == "prod":
                add("database_url_prod", False, "SQLite is not allowed when APP_ENV=prod")
            else:
                add("database_url_sqlite", True, "SQLite in use; fine for local runs only", warning=True)

    port = (env_map.get("PORT") or "").strip()
    if port:
        ok = port.isdigit() and 0 < int(port) < 65536
        add("port", ok, f"PORT={port}" if ok else f"PORT must be 1-65535, got {port!r}")

    seed_count = (env_map.get("SEED_USER_COUNT") or "").strip()
    if seed_count:
        add("seed_user_count", seed_count.isdigit(), f"SEED_USER_COUNT={seed_count}")

    passed = all(check.ok for check in checks)
    warnings_present = any(check.warning for check in checks)
    overall = passed and (not strict or not warnings_present)
    return overall, checks


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate required environment variables.")
    parser.add_argument("--strict", action="store_true", help="Treat warnings as failures")
    args = parser.parse_args(argv)

    ok, results = validate_env(strict=args.strict)
    print(format_report(results))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
