"""
Module 05 - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m allowlist_cli build <input_txt> [--out DIR] [--json]
    python -m allowlist_cli path <address> [--data-dir DIR] [--json]
    python -m allowlist_cli info [--data-dir DIR] [--json]
    python -m allowlist_cli serve [--host HOST] [--port PORT] [--data-dir DIR]
    python -m allowlist_cli generate <count> <output_file>
    python -m allowlist_cli accounts --count N --output FILE [--seed N]
    python -m allowlist_cli config --init

Environment Variables:
    ALLOWLIST_DATA_DIR          Tree directory (default: merkledb)
    ALLOWLIST_HOST              Proof server host (default: 127.0.0.1)
    ALLOWLIST_PORT              Proof server port (default: 3000)
    ALLOWLIST_LOG_LEVEL         Log level (default: INFO)
    ALLOWLIST_LOG_FILE          Also log to this file
    ALLOWLIST_MAX_ADDRESSES     Address-count safety ceiling
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from allowlist_cli.commands import accounts, build, generate, info, path, serve
from allowlist_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR
from allowlist_cli.config import get_default_config_template, load_config
from core.crypto.keys import DEFAULT_ACCOUNT_SEED


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="allowlist",
        description="Allowlist Merkle CLI - Build disk-resident Merkle trees and query inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./allowlist.json or ~/.config/allowlist/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Build a tree directory from a text file of addresses",
        description="Parse, sort and deduplicate addresses, then write addresses.bin and every layer file.",
    )
    build_parser.add_argument(
        "input",
        type=str,
        help="Text file with one address per line",
    )
    build_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Output directory (default: configured data_dir, merkledb)",
    )
    build_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    build_parser.set_defaults(func=build.build_cmd)

    # --- path command ---
    path_parser = subparsers.add_parser(
        "path",
        help="Print the Merkle path for an address",
        description="Look up an address and print every sibling hash from its leaf to the root.",
    )
    path_parser.add_argument(
        "address",
        type=str,
        help="Address to prove, with or without 0x",
    )
    path_parser.add_argument(
        "--data-dir", "-d",
        type=str,
        default=None,
        help="Tree directory (default: configured data_dir)",
    )
    path_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output the proof as JSON",
    )
    path_parser.set_defaults(func=path.path_cmd)

    # --- info command ---
    info_parser = subparsers.add_parser(
        "info",
        help="Show size, depth and root of a tree directory",
    )
    info_parser.add_argument("--data-dir", "-d", type=str, default=None, help="Tree directory")
    info_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    info_parser.set_defaults(func=info.info_cmd)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve inclusion proofs over HTTP",
        description="Check the tree directory, then serve GET /proof/{address}, /info and /health.",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Bind host (default: 127.0.0.1)")
    serve_parser.add_argument("--port", "-p", type=int, default=None, help="Bind port (default: 3000)")
    serve_parser.add_argument("--data-dir", "-d", type=str, default=None, help="Tree directory")
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- generate command ---
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write random addresses to a text file",
    )
    generate_parser.add_argument("count", type=int, help="Number of addresses")
    generate_parser.add_argument("output", type=str, help="Output text file")
    generate_parser.set_defaults(func=generate.generate_cmd)

    # --- accounts command ---
    accounts_parser = subparsers.add_parser(
        "accounts",
        help="Generate deterministic test key pairs",
        description="Write seeded key pairs as JSON fixtures. Never use these keys for real funds.",
    )
    accounts_parser.add_argument("--count", "-n", type=int, required=True, help="Number of accounts")
    accounts_parser.add_argument("--output", "-o", type=str, required=True, help="Output JSON file")
    accounts_parser.add_argument(
        "--seed", "-s",
        type=int,
        default=DEFAULT_ACCOUNT_SEED,
        help=f"Random seed (default: {DEFAULT_ACCOUNT_SEED})",
    )
    accounts_parser.set_defaults(func=accounts.accounts_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="allowlist.json",
        help="Path for config file (default: allowlist.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (ALLOWLIST_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: allowlist config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=runtime error, 2=usage error)
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 0 for --help/--version, 2 for usage errors
        return e.code if isinstance(e.code, int) else EXIT_USAGE_ERROR

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.log_level, log_file=config.log_file)

    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.log_level == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
