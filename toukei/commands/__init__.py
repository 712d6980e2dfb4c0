"""CLI command handlers and the config access they share."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from toukei.config import CONFIG_FILE, load_config


def command_config_path(args: argparse.Namespace) -> Path:
    """Config file from --config, or the project default."""
    raw = getattr(args, "config", None)
    return Path(raw) if raw else CONFIG_FILE


def command_config(args: argparse.Namespace) -> dict[str, Any]:
    return load_config(command_config_path(args))
