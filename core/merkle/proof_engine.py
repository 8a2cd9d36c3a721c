"""
Module 02 - Proof Engine
Inclusion proofs read straight from the on-disk stores.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- SiblingSide: which side a proof step's sibling sits on
- ProofStep / ProofResult: the evidence chain from leaf to root
- build_proof: binary-search the address file, then walk the layer
  files from level 0 to the root, one sibling read per level
- verify_proof_result: replay a result's steps and compare to its root

Walk invariants:
- State is (level, path_index); every non-terminal step halves
  path_index and increments level, so the walk ends in O(log n) steps
- The single terminal state is a layer holding exactly one node
- An even path_index has its sibling on the right at
  min(path_index + 1, count - 1); the last node of an odd layer is
  therefore its own sibling. An odd path_index has its sibling on the
  left at path_index - 1.

Stores are opened per call and only read, so concurrent calls need no
coordination.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from core.crypto.checksum import normalize_hex, parse_address
from core.crypto.hashing import hash_leaf, hash_pair, to_hex
from core.merkle.address_store import addresses_path, find_address_index
from core.merkle.layer_store import layer_node_count, layer_path, read_node
from core.schemas.constants import MAX_ADDRESSES
from core.schemas.errors import (
    AddressNotFoundError,
    CorruptedDataError,
    IndexOutOfBoundsError,
    InternalError,
    InvalidLayerError,
    MerkleException,
    MissingLayerError,
)


logger = logging.getLogger(__name__)


class SiblingSide(str, Enum):
    """Position of the sibling relative to the node being proved."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def proof_flag(self) -> bool:
        """True when the sibling is on the left."""
        return self is SiblingSide.LEFT


@dataclass(frozen=True)
class ProofStep:
    """
    One sibling needed to hash a node into its parent.

    Attributes:
        level: Layer the sibling was read from
        sibling_index: Position of the sibling within that layer
        sibling_hash: The sibling's 32-byte hash
        side: Which side the sibling sits on
    """
    level: int
    sibling_index: int
    sibling_hash: bytes
    side: SiblingSide

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "sibling_index": self.sibling_index,
            "side": self.side.value,
            "hash": to_hex(self.sibling_hash),
        }


@dataclass(frozen=True)
class ProofResult:
    """
    Full inclusion proof for one address.

    Attributes:
        normalized_address: Input text with a 0x prefix
        index: Position of the address in addresses.bin
        total: Number of addresses in the set
        lookups: Binary-search comparisons performed (diagnostic only)
        leaf: keccak256 of the raw address
        root: Hash stored in the top layer
        root_level: Level of the top layer
        steps: Sibling steps, ordered leaf to root
    """
    normalized_address: str
    index: int
    total: int
    lookups: int
    leaf: bytes
    root: bytes
    root_level: int
    steps: list[ProofStep] = field(default_factory=list)

    @property
    def proof_flags(self) -> list[bool]:
        """Parallel to steps: True where the sibling is on the left."""
        return [step.side.proof_flag for step in self.steps]

    @property
    def siblings(self) -> list[bytes]:
        return [step.sibling_hash for step in self.steps]

    def to_dict(self) -> dict[str, Any]:
        """Encode for JSON presentation layers."""
        return {
            "address": self.normalized_address,
            "index": self.index,
            "total": self.total,
            "lookups": self.lookups,
            "leaf": to_hex(self.leaf),
            "root": to_hex(self.root),
            "root_level": self.root_level,
            "proof": [step.to_dict() for step in self.steps],
            "proof_flags": self.proof_flags,
        }


def _missing_layer(level: int, path: Path) -> MissingLayerError:
    if level == 0:
        return MissingLayerError(
            "No layer files found (expected layer00.bin, layer01.bin, ...)",
            level=0,
        )
    return MissingLayerError(
        f"Missing layer file for level {level} (expected {path})",
        level=level,
    )


def _build_proof(db_dir: Path, address_text: str, max_addresses: int) -> ProofResult:
    address = parse_address(address_text)

    found = find_address_index(addresses_path(db_dir), address)
    if found is None:
        raise AddressNotFoundError()
    index, lookups, total = found

    if total > max_addresses:
        raise InvalidLayerError(
            f"Address count {total} exceeds maximum of {max_addresses}",
            details={"total": total, "max_addresses": max_addresses},
        )

    leaf = hash_leaf(address)
    steps: list[ProofStep] = []
    level = 0
    path_index = index

    while True:
        path = layer_path(db_dir, level)
        if not path.exists():
            raise _missing_layer(level, path)

        node_count = layer_node_count(path)
        if node_count == 0:
            raise CorruptedDataError(
                f"Layer {level:02d} is empty",
                details={"level": level},
            )
        if path_index >= node_count:
            raise IndexOutOfBoundsError(level=level, index=path_index, count=node_count)

        if node_count == 1:
            root = read_node(path, 0, level=level)
            return ProofResult(
                normalized_address=normalize_hex(address_text),
                index=index,
                total=total,
                lookups=lookups,
                leaf=leaf,
                root=root,
                root_level=level,
                steps=steps,
            )

        if path_index % 2 == 0:
            sibling_index = min(path_index + 1, node_count - 1)
            side = SiblingSide.RIGHT
        else:
            sibling_index = path_index - 1
            side = SiblingSide.LEFT

        steps.append(
            ProofStep(
                level=level,
                sibling_index=sibling_index,
                sibling_hash=read_node(path, sibling_index, level=level),
                side=side,
            )
        )
        path_index //= 2
        level += 1


def build_proof(
    db_dir: Path,
    address_text: str,
    max_addresses: int = MAX_ADDRESSES,
) -> ProofResult:
    """
    Build the inclusion proof for an address.

    Args:
        db_dir: Directory holding addresses.bin and layerNN.bin
        address_text: Address with or without 0x, any letter case
        max_addresses: Safety ceiling on the address count

    Returns:
        ProofResult whose steps replay from leaf to root

    Raises:
        InvalidAddressError: Wrong length after the optional 0x
        InvalidHexError: Non-hex characters
        AddressNotFoundError: Address is not in the set
        InvalidLayerError: Address count exceeds max_addresses
        MissingLayerError: layer00.bin or an intermediate layer is absent
        CorruptedDataError: A file length is not a whole number of records,
            or a layer is empty
        IndexOutOfBoundsError: Address file and layers disagree
        FileIOError: A store file could not be read
        InternalError: Any other unexpected failure
    """
    db_dir = Path(db_dir)
    try:
        return _build_proof(db_dir, address_text, max_addresses)
    except MerkleException:
        raise
    except OSError as e:
        logger.exception(f"Unexpected I/O failure building proof in {db_dir}")
        raise InternalError(str(e)) from e


def verify_proof_result(result: ProofResult) -> bool:
    """
    Replay a proof from its leaf and compare against its root.

    A left sibling hashes as keccak(sibling || node), a right sibling as
    keccak(node || sibling).
    """
    node = result.leaf
    for step in result.steps:
        if step.side is SiblingSide.LEFT:
            node = hash_pair(step.sibling_hash, node)
        else:
            node = hash_pair(node, step.sibling_hash)
    return node == result.root


__all__ = [
    "SiblingSide",
    "ProofStep",
    "ProofResult",
    "build_proof",
    "verify_proof_result",
]
