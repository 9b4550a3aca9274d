from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from discord_events_cal.config.schema import ExportConfig, validate_config


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return data


def resolve_config_path(config_path: str | None = None) -> Path:
    if not config_path:
        raise ValueError("DISCORD_EVENTS_CONFIG_PATH must be provided")
    return Path(config_path).expanduser().resolve()


def load_config(config_path: Path) -> ExportConfig:
    return validate_config(_load_yaml(config_path))


def load_from_env() -> ExportConfig:
    path = resolve_config_path(os.getenv("DISCORD_EVENTS_CONFIG_PATH"))
    config = load_config(path)
    if snapshot_dir := os.getenv("SNAPSHOT_DIR"):
        config.service.snapshot_dir = snapshot_dir
    return config
