"""
Common test fixtures shared by all modules.

Provides factory functions for the allowlist Merkle engine:
- Raw 20-byte addresses
- Address text files for the builder
- Fully built tree directories
"""

import random
from pathlib import Path
from typing import Iterable, Optional

from core.crypto.checksum import to_checksum_address
from core.merkle.tree_builder import BuildSummary, build_database


def make_address(byte: int) -> bytes:
    """20-byte address with every byte equal to ``byte`` (0x0101...01 for 1)."""
    return bytes([byte]) * 20


def make_addresses(count: int, seed: int = 7) -> list[bytes]:
    """``count`` distinct pseudo-random addresses, unsorted."""
    rng = random.Random(seed)
    seen: set[bytes] = set()
    while len(seen) < count:
        seen.add(rng.getrandbits(160).to_bytes(20, "big"))
    return list(seen)


def write_address_file(
    path: Path,
    addresses: Iterable[bytes],
    checksum: bool = True,
    extra_lines: Optional[list[str]] = None,
) -> Path:
    """Write addresses as text, one per line, in checksum or lowercase form."""
    lines = [
        to_checksum_address(a) if checksum else "0x" + a.hex()
        for a in addresses
    ]
    if extra_lines:
        lines.extend(extra_lines)
    path.write_text("\n".join(lines) + "\n")
    return path


def make_tree(db_dir: Path, addresses: Iterable[bytes]) -> BuildSummary:
    """Build a tree directory through the real builder."""
    return build_database(list(addresses), db_dir)
