from __future__ import annotations

import argparse
import logging
from pathlib import Path

from discord_events_cal.common.ics import build_ics
from discord_events_cal.config.loader import load_config
from discord_events_cal.discord.mapping import build_guild_calendar
from discord_events_cal.service.snapshots import load_snapshot

logger = logging.getLogger(__name__)


def render_snapshot(snapshot_path: Path, config_path: Path, out_path: Path) -> str:
    config = load_config(config_path)
    snapshot = load_snapshot(snapshot_path)
    guild_id = str(snapshot.guild.id)
    calendar = build_guild_calendar(snapshot, config, config.calendar_url(guild_id))
    ics_text = build_ics(calendar)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = out_path.with_suffix(out_path.suffix + ".tmp")
    # Keep CRLF line endings intact.
    tmp_path.write_bytes(ics_text.encode("utf-8"))
    tmp_path.replace(out_path)
    logger.info(
        "Calendar for guild %s with %d events written to %s",
        guild_id,
        len(calendar.events),
        out_path,
    )
    return ics_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a guild snapshot to iCalendar")
    parser.add_argument("--snapshot", required=True, help="Path to guild snapshot JSON")
    parser.add_argument("--config", required=True, help="Path to export config YAML")
    parser.add_argument("--out", required=True, help="Output .ics path")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(message)s")

    render_snapshot(Path(args.snapshot), Path(args.config), Path(args.out))
    return 0
