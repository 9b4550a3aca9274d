from __future__ import annotations

import re
from datetime import UTC, datetime

_UNESCAPE_PATTERN = re.compile(r"\\([\\;,nN])")
_PARAM_SPECIALS = frozenset(":;,")


def escape_text(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def unescape_text(value: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        char = match.group(1)
        return "\n" if char in "nN" else char

    return _UNESCAPE_PATTERN.sub(_replace, value)


def quote_param_value(value: str) -> str:
    # Embedded double quotes are passed through unescaped.
    if any(char in _PARAM_SPECIALS for char in value):
        return f'"{value}"'
    return value


def format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")
