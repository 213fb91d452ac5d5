"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from bladetags.core.config import ConfigManager


def get_config_manager(args: argparse.Namespace) -> ConfigManager:
    """Build a ConfigManager from the common ``--config`` flag."""
    config = getattr(args, "config", None)
    return ConfigManager(Path.cwd(), config_path=Path(config) if config else None)


__all__ = ["get_config_manager"]
