from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from flask import Flask, jsonify

from discord_events_cal.common.ics import build_ics
from discord_events_cal.common.snowflake import SnowflakeParseError, decode
from discord_events_cal.config.loader import load_from_env
from discord_events_cal.config.schema import ExportConfig
from discord_events_cal.discord.mapping import build_guild_calendar
from discord_events_cal.service.snapshots import SnapshotLoader, SnapshotNotFoundError

logger = logging.getLogger(__name__)


def create_app(config: ExportConfig | None = None) -> Flask:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    if config is None:
        config = load_from_env()

    snapshot_loader = SnapshotLoader(
        Path(config.service.snapshot_dir).resolve(),
        config.service.reload_interval_seconds,
    )

    app = Flask(__name__)
    app.config["EXPORT_CONFIG"] = config
    app.config["SNAPSHOT_LOADER"] = snapshot_loader

    @app.get("/healthz")
    def healthz() -> Any:
        return jsonify({"ok": True})

    @app.get("/guilds/<guild_id>/calendar.ics")
    def guild_calendar(guild_id: str) -> Any:
        try:
            snowflake = decode(guild_id)
        except SnowflakeParseError:
            return jsonify({"error": "Guild not found"}), 404

        try:
            snapshot = snapshot_loader.get_snapshot(snowflake)
        except SnapshotNotFoundError:
            return jsonify({"error": "Guild not found"}), 404
        except ValueError:
            logger.exception("Unable to load snapshot for guild %s", snowflake)
            return jsonify({"error": "Internal error"}), 500

        calendar = build_guild_calendar(
            snapshot, config, config.calendar_url(str(snowflake))
        )
        return app.response_class(build_ics(calendar), mimetype="text/calendar")

    return app
