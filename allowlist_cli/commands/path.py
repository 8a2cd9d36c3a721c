"""
Module 05 - CLI Path Command

Print the Merkle path (inclusion proof) for one address.

Usage:
    allowlist path <address> [--data-dir merkledb] [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace

from allowlist_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    print_error,
    resolve_data_dir,
)
from core.crypto.hashing import to_hex
from core.merkle.layer_store import ensure_db_present
from core.merkle.proof_engine import ProofResult, build_proof
from core.schemas.constants import MAX_ADDRESSES
from core.schemas.errors import MerkleException


def print_proof_human(result: ProofResult) -> None:
    """Print a proof in human-readable format."""
    print(f"Address: {result.normalized_address}")
    print(
        f"Found in addresses.bin at index {result.index} "
        f"({result.total} total, {result.lookups} lookups)"
    )
    print(f"Leaf hash: {to_hex(result.leaf)}")
    for step in result.steps:
        print(
            f"Layer {step.level:02d} sibling ({step.side.value}): "
            f"idx {step.sibling_index} -> {to_hex(step.sibling_hash)}"
        )
    print(f"Root (layer {result.root_level:02d}): {to_hex(result.root)}")


def print_proof_json(result: ProofResult) -> None:
    """Print a proof as JSON."""
    print(json.dumps(result.to_dict(), indent=2))


def path_cmd(args: Namespace) -> int:
    """
    Execute the path command.

    Nothing is printed to stdout unless the whole proof was built.
    """
    data_dir = resolve_data_dir(args)
    config = getattr(args, "cli_config", None)
    max_addresses = config.max_addresses if config is not None else MAX_ADDRESSES

    try:
        ensure_db_present(data_dir)
        result = build_proof(data_dir, args.address, max_addresses=max_addresses)
    except MerkleException as e:
        print_error(e.message)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_proof_json(result)
    else:
        print_proof_human(result)
    return EXIT_SUCCESS
