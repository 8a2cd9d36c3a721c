"""
Module 05 - CLI Accounts Command

Generate deterministic test key pairs as a JSON fixture.

Usage:
    allowlist accounts --count 100 --output accounts.json [--seed 42]

Output:
    [{"address": "0x...", "private_key": "0x..."}, ...]
"""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path

from allowlist_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, print_error
from core.crypto.keys import generate_test_accounts


def accounts_cmd(args: Namespace) -> int:
    """Execute the accounts command."""
    if args.count <= 0:
        print_error("Count must be greater than zero")
        return EXIT_RUNTIME_ERROR

    accounts = generate_test_accounts(args.count, seed=args.seed)
    output_path = Path(args.output)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump([a.to_dict() for a in accounts], f, indent=2)
    except OSError as e:
        print_error(str(e))
        return EXIT_RUNTIME_ERROR

    print(f"Generated {args.count} test accounts to {output_path}")
    print(f"  Seed: {args.seed} (deterministic)")
    return EXIT_SUCCESS
