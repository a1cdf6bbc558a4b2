from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

# A password that survived redaction; "***" is the redacted form.
FORBIDDEN_REGEXES: dict[str, re.Pattern[str]] = {
    "url_password": re.compile(r"[A-Za-z][A-Za-z0-9+.-]*://[^:/@\s]+:(?!\*\*\*@)[^@/\s]+@"),
    "bearer_header": re.compile(r"Authorization:\s*Bearer\s+\S+", re.IGNORECASE),
    "private_key_block": re.compile(r"BEGIN\s+(?:RSA\s+)?PRIVATE\s+KEY"),
    "password_keyword": re.compile(r"\bpassword\s*[:=]\s*\S+", re.IGNORECASE),
}


@dataclass(frozen=True)
class Violation:
    pattern_name: str
    snippet: str
    line_no: int

    def __str__(self) -> str:
        return f"- line {self.line_no}: {self.pattern_name} ({self.snippet})"


def _mask(secret: str) -> str:
    # The report itself ends up in CI output; keep only a short prefix.
    return secret[:6] + "…"


def scan_text(text: str) -> list[Violation]:
    return [
        Violation(name, _mask(match.group(0)), line_no)
        for line_no, line in enumerate(text.splitlines(), start=1)
        for name, pattern in FORBIDDEN_REGEXES.items()
        for match in pattern.finditer(line)
    ]


def scan_file(path: Union[str, PathLike[str]]) -> list[Violation]:
    file_path = Path(path)
    if not file_path.exists():
        return []
    return scan_text(file_path.read_text(errors="ignore"))


def format_report(violations: Iterable[Violation]) -> str:
    lines = [str(v) for v in violations]
    if not lines:
        return ""
    return "\n".join(["Secrets found in test logs:", *lines])
