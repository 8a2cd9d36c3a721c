"""
Module 05 - CLI Generate Command

Write random checksum addresses, one per line, for load testing the
builder. Keys come from the OS CSPRNG and are discarded.

Usage:
    allowlist generate <count> <output_file>
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from allowlist_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, print_error
from core.crypto.keys import generate_account
from core.progress import ProgressReporter


logger = logging.getLogger(__name__)


def write_random_addresses(count: int, output_path: Path) -> None:
    """Write ``count`` freshly generated addresses to ``output_path``."""
    progress = ProgressReporter(count, "Generating addresses", logger)
    with open(output_path, "w", encoding="utf-8") as f:
        for _ in range(count):
            f.write(generate_account().address)
            f.write("\n")
            progress.advance()


def generate_cmd(args: Namespace) -> int:
    """Execute the generate command."""
    if args.count <= 0:
        print_error("Number of addresses must be greater than zero")
        return EXIT_RUNTIME_ERROR

    output_path = Path(args.output)
    try:
        write_random_addresses(args.count, output_path)
    except OSError as e:
        print_error(str(e))
        return EXIT_RUNTIME_ERROR

    print(f"Wrote {args.count} addresses to {output_path}")
    return EXIT_SUCCESS
