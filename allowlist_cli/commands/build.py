"""
Module 05 - CLI Build Command

Convert a text file of addresses (one per line) into a tree directory:
addresses.bin plus one layerNN.bin per level.

Usage:
    allowlist build addresses.txt [--out merkledb] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from pathlib import Path

from allowlist_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    print_error,
    resolve_data_dir,
)
from core.merkle.tree_builder import BuildSummary, build_database_from_text
from core.schemas.constants import ADDRESS_SIZE
from core.schemas.errors import MerkleException


logger = logging.getLogger(__name__)


def print_summary_human(summary: BuildSummary) -> None:
    """Print build summary in human-readable format."""
    print(
        f"Wrote {summary.address_count} unique addresses ({ADDRESS_SIZE}-byte each) "
        f"to {summary.db_dir / 'addresses.bin'}"
    )
    print(
        f"Built {summary.layer_count} Merkle layers (root: {summary.root_hex}) "
        f"into {summary.db_dir}"
    )


def print_summary_json(summary: BuildSummary) -> None:
    """Print build summary as JSON."""
    print(json.dumps({
        "data_dir": str(summary.db_dir),
        "address_count": summary.address_count,
        "layer_count": summary.layer_count,
        "layer_sizes": summary.layer_sizes,
        "root": summary.root_hex,
    }, indent=2))


def build_cmd(args: Namespace) -> int:
    """
    Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    input_path = Path(args.input)
    out_dir = Path(args.out) if args.out else resolve_data_dir(args)

    if not input_path.exists():
        print_error(f"Input file not found: {input_path}")
        return EXIT_RUNTIME_ERROR

    logger.info(f"Building Merkle tree from {input_path} into {out_dir}")
    try:
        summary = build_database_from_text(input_path, out_dir)
    except MerkleException as e:
        print_error(e.message)
        return EXIT_RUNTIME_ERROR
    except (ValueError, OSError) as e:
        print_error(str(e))
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_summary_json(summary)
    else:
        print_summary_human(summary)
    return EXIT_SUCCESS
