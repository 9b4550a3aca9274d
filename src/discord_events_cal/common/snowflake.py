from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

DISCORD_EPOCH_MS = 1420070400000
MAX_SNOWFLAKE = 2**64 - 1

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_DECIMAL_PATTERN = re.compile(r"\+?[0-9]+")


class SnowflakeParseError(ValueError):
    pass


@dataclass(frozen=True)
class Snowflake:
    """A 64-bit Discord identifier.

    Layout, most significant bits first: 42 bits of milliseconds since the
    Discord epoch (2015-01-01T00:00:00Z), 5 bits shard (worker) id, 5 bits
    process id, 12 bits per-process sequence.
    """

    value: int

    def timestamp(self) -> datetime:
        millis = (self.value >> 22) + DISCORD_EPOCH_MS
        return _UNIX_EPOCH + timedelta(milliseconds=millis)

    def shard_id(self) -> int:
        return (self.value & 0x3E0000) >> 17

    def process_id(self) -> int:
        return (self.value & 0x1F000) >> 12

    def sequence(self) -> int:
        return self.value & 0xFFF

    def __str__(self) -> str:
        return str(self.value)


def decode(raw: str) -> Snowflake:
    if not isinstance(raw, str) or not _DECIMAL_PATTERN.fullmatch(raw):
        raise SnowflakeParseError(f"Invalid snowflake: {raw!r}")
    digits = raw.lstrip("+").lstrip("0") or "0"
    if len(digits) > 20 or int(digits) > MAX_SNOWFLAKE:
        raise SnowflakeParseError(f"Snowflake out of 64-bit range: {raw!r}")
    return Snowflake(int(digits))
