"""
Module 02 - Tree Builder
Bottom-up construction of every hash layer from the sorted address set.

Owner: Protocol/Crypto Engineer
Module ID: M02

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = keccak256(address_bytes)
2. Parent hashing: parent = keccak256(left || right)
3. Padding rule: an unpaired last node is hashed with itself,
   parent = keccak256(node || node). Never a zero hash, never promoted.
4. Empty input: rejected, there is no empty-tree root
5. Single leaf: root = leaf, one layer, no hashing performed

Changing any of these rules changes every root; verifiers must apply
exactly the same duplication.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from core.crypto.checksum import parse_address
from core.crypto.hashing import hash_leaf, hash_pair, to_hex
from core.merkle.address_store import addresses_path, prepare_addresses, write_addresses
from core.merkle.layer_store import write_layers
from core.progress import ProgressReporter
from core.schemas.errors import InvalidAddressError, InvalidHexError


logger = logging.getLogger(__name__)

# Below this many hash operations a build is not worth reporting on.
PROGRESS_MIN_HASH_OPS = 100


@dataclass(frozen=True)
class BuildSummary:
    """Outcome of writing a full tree directory."""

    db_dir: Path
    address_count: int
    layer_sizes: list[int] = field(default_factory=list)
    root: bytes = b""

    @property
    def layer_count(self) -> int:
        return len(self.layer_sizes)

    @property
    def root_hex(self) -> str:
        return to_hex(self.root)


def total_hash_ops(count: int) -> int:
    """Number of parent hashes needed to reduce ``count`` leaves to a root."""
    total = 0
    while count > 1:
        count = math.ceil(count / 2)
        total += count
    return total


def next_layer(current: Sequence[bytes]) -> list[bytes]:
    """
    Hash a layer pairwise into the layer above it.

    Example: [a, b, c] -> [keccak(a||b), keccak(c||c)]
    """
    parents: list[bytes] = []
    for i in range(0, len(current), 2):
        left = current[i]
        right = current[i + 1] if i + 1 < len(current) else left
        parents.append(hash_pair(left, right))
    return parents


def build_layers(
    leaves: Sequence[bytes],
    progress: Optional[ProgressReporter] = None,
) -> list[list[bytes]]:
    """
    Build all layers from the leaf hashes up to the root.

    Args:
        leaves: Leaf hashes in address-file order
        progress: Optional reporter advanced once per parent hash

    Returns:
        Layers ordered from level 0 (the leaves, verbatim) to the root
        level (a single node)

    Raises:
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot build tree from empty leaf set")

    current: list[bytes] = list(leaves)
    layers: list[list[bytes]] = [current]

    while len(current) > 1:
        current = next_layer(current)
        layers.append(current)
        if progress is not None:
            progress.advance(len(current))

    if progress is not None:
        progress.finish()

    return layers


def count_non_empty_lines(path: Path) -> int:
    """Count lines that hold something other than whitespace."""
    with open(path, "r", encoding="utf-8") as f:
        return sum(1 for line in f if line.strip())


def read_address_text(path: Path) -> list[bytes]:
    """
    Parse a text file with one address per line.

    Blank lines are skipped. Parse failures are re-raised with the
    1-based line number prefixed to the message.

    Raises:
        InvalidAddressError, InvalidHexError: On the first malformed line
    """
    total = count_non_empty_lines(path)
    progress = ProgressReporter(total, "Parsing addresses", logger) if total else None

    addresses: list[bytes] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            trimmed = line.strip()
            if not trimmed:
                continue
            try:
                addresses.append(parse_address(trimmed))
            except (InvalidAddressError, InvalidHexError) as e:
                e.message = f"Line {line_no}: {e.message}"
                e.args = (e.message,)
                raise
            if progress is not None:
                progress.advance()
    return addresses


def build_database(addresses: Iterable[bytes], db_dir: Path) -> BuildSummary:
    """
    Write addresses.bin and every layerNN.bin for an address set.

    Addresses are sorted and deduplicated first, so the input may be in
    any order and contain repeats.

    Raises:
        ValueError: If the address set is empty
    """
    db_dir = Path(db_dir)
    unique = prepare_addresses(addresses)
    if not unique:
        raise ValueError("Input contained no addresses")

    db_dir.mkdir(parents=True, exist_ok=True)
    write_addresses(addresses_path(db_dir), unique)
    logger.info(f"Wrote {len(unique)} unique addresses to {addresses_path(db_dir)}")

    leaves = [hash_leaf(address) for address in unique]
    ops = total_hash_ops(len(leaves))
    progress = (
        ProgressReporter(ops, "Hashing layers", logger)
        if ops >= PROGRESS_MIN_HASH_OPS
        else None
    )
    layers = build_layers(leaves, progress=progress)
    write_layers(db_dir, layers)

    summary = BuildSummary(
        db_dir=db_dir,
        address_count=len(unique),
        layer_sizes=[len(layer) for layer in layers],
        root=layers[-1][0],
    )
    logger.info(
        f"Built {summary.layer_count} Merkle layers (root: {summary.root_hex}) into {db_dir}"
    )
    return summary


def build_database_from_text(input_path: Path, db_dir: Path) -> BuildSummary:
    """Parse an address text file and build its tree directory."""
    addresses = read_address_text(input_path)
    if not addresses:
        raise ValueError("Input file contained no addresses")
    return build_database(addresses, db_dir)


__all__ = [
    "BuildSummary",
    "PROGRESS_MIN_HASH_OPS",
    "total_hash_ops",
    "next_layer",
    "build_layers",
    "count_non_empty_lines",
    "read_address_text",
    "build_database",
    "build_database_from_text",
]
