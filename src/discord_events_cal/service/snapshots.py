from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from discord_events_cal.common.snowflake import Snowflake
from discord_events_cal.discord.models import GuildSnapshot

logger = logging.getLogger(__name__)


class SnapshotNotFoundError(LookupError):
    pass


def load_snapshot(path: Path) -> GuildSnapshot:
    if not path.exists():
        raise SnapshotNotFoundError(f"Snapshot not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid snapshot JSON in {path}: {exc}") from exc
    try:
        return GuildSnapshot.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid snapshot format: {exc}") from exc


@dataclass
class _CachedSnapshot:
    snapshot: GuildSnapshot
    mtime: float
    last_check: float


@dataclass
class SnapshotLoader:
    directory: Path
    reload_interval_seconds: int
    _cache: dict[Snowflake, _CachedSnapshot] = field(default_factory=dict)

    def path_for(self, guild_id: Snowflake) -> Path:
        return self.directory / f"{guild_id}.json"

    def get_snapshot(self, guild_id: Snowflake) -> GuildSnapshot:
        now = time.monotonic()
        cached = self._cache.get(guild_id)
        if cached is None:
            return self._reload(guild_id)

        if now - cached.last_check >= self.reload_interval_seconds:
            cached.last_check = now
            path = self.path_for(guild_id)
            if not path.exists():
                del self._cache[guild_id]
                raise SnapshotNotFoundError(f"Snapshot not found: {path}")
            if path.stat().st_mtime > cached.mtime:
                return self._reload(guild_id)

        return cached.snapshot

    def _reload(self, guild_id: Snowflake) -> GuildSnapshot:
        path = self.path_for(guild_id)
        snapshot = load_snapshot(path)
        self._cache[guild_id] = _CachedSnapshot(
            snapshot=snapshot,
            mtime=path.stat().st_mtime,
            last_check=time.monotonic(),
        )
        logger.info("Loaded snapshot for guild %s", guild_id)
        return snapshot
