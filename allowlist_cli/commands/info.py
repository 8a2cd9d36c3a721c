"""
Module 05 - CLI Info Command

Report the size, depth and root of a built tree directory.

Usage:
    allowlist info [--data-dir merkledb] [--json]
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
from core.merkle.address_store import address_count, addresses_path
from core.merkle.layer_store import available_layers, ensure_db_present, layer_node_count, read_root
from core.schemas.errors import MerkleException


def info_cmd(args: Namespace) -> int:
    """Execute the info command."""
    data_dir = resolve_data_dir(args)

    try:
        ensure_db_present(data_dir)
        layers = available_layers(data_dir)
        layer_sizes = [layer_node_count(p) for p in layers]
        total = address_count(addresses_path(data_dir))
        root, root_level = read_root(data_dir)
    except MerkleException as e:
        print_error(e.message)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({
            "data_dir": str(data_dir),
            "total": total,
            "layer_count": len(layers),
            "layer_sizes": layer_sizes,
            "root": to_hex(root),
            "root_level": root_level,
        }, indent=2))
        return EXIT_SUCCESS

    print(f"data_dir: {data_dir}")
    print(f"addresses: {total}")
    print(f"layers: {len(layers)}")
    for level, size in enumerate(layer_sizes):
        print(f"  layer{level:02d}.bin: {size} nodes")
    print(f"root (layer {root_level:02d}): {to_hex(root)}")
    return EXIT_SUCCESS
