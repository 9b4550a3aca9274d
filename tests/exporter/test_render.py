import json
from pathlib import Path
from typing import Any

from discord_events_cal.exporter.__main__ import main


def test_render_command_writes_ics(tmp_path: Path, snapshot_data: dict[str, Any]) -> None:
    snapshot_path = tmp_path / "guild.json"
    snapshot_path.write_text(json.dumps(snapshot_data), encoding="utf-8")
    config_path = tmp_path / "export.yaml"
    config_path.write_text("root_url: https://events.example.com\n", encoding="utf-8")
    out_path = tmp_path / "out" / "guild.ics"

    rc = main(
        [
            "render",
            "--snapshot",
            str(snapshot_path),
            "--config",
            str(config_path),
            "--out",
            str(out_path),
        ]
    )

    assert rc == 0
    data = out_path.read_bytes()
    assert data.startswith(b"BEGIN:VCALENDAR\r\n")
    assert data.count(b"BEGIN:VEVENT\r\n") == 2
    assert b"UID:197038439483310086@c.discord-events.magicalcodewit.ch\r\n" in data
    assert not out_path.with_suffix(".ics.tmp").exists()
