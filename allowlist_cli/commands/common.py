"""
Exit codes and helpers shared by the CLI commands.
"""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from core.config.runtime import RuntimeConfig


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_USAGE_ERROR = 2


def print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def resolve_data_dir(args: Namespace) -> Path:
    """--data-dir if given, otherwise the configured data_dir."""
    if getattr(args, "data_dir", None):
        return Path(args.data_dir)
    config: RuntimeConfig = getattr(args, "cli_config", None) or RuntimeConfig()
    return config.data_path
