from __future__ import annotations

import argparse

from discord_events_cal.exporter.render import main as render_main


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Discord events calendar exporter")
    subparsers = parser.add_subparsers(dest="command", required=True)
    render = subparsers.add_parser("render", help="Render a guild snapshot to .ics")
    render.add_argument("--snapshot", required=True, help="Path to guild snapshot JSON")
    render.add_argument("--config", required=True, help="Path to export config YAML")
    render.add_argument("--out", required=True, help="Output .ics path")
    render.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.command == "render":
        return render_main(
            [
                "--snapshot",
                args.snapshot,
                "--config",
                args.config,
                "--out",
                args.out,
                "--log-level",
                args.log_level,
            ]
        )
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
