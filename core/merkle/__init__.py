"""
Module 02 - Disk-Resident Merkle Tree
Persisted Merkle tree over a sorted address set, with inclusion proofs.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- Address store: sorted 20-byte records with seek-per-comparison lookup
- Layer store: one 32-byte-record file per tree level
- Tree builder: leaf hashes -> every layer up to the root
- Proof engine: address text -> sibling steps from leaf to root

Canonical Commitment Rules:
1. Leaf hashing: keccak256(address_bytes)
2. Parent hashing: keccak256(left || right)
3. Padding: an unpaired last node is hashed with itself
4. Single leaf: root = leaf

Usage:
    from core.merkle import build_database, build_proof, verify_proof_result

    build_database(addresses, Path("merkledb"))
    result = build_proof(Path("merkledb"), "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")
    assert verify_proof_result(result)
"""
from .address_store import (
    addresses_path,
    prepare_addresses,
    write_addresses,
    address_count,
    read_address,
    find_address_index,
)

from .layer_store import (
    layer_path,
    layer_node_count,
    read_node,
    write_layers,
    available_layers,
    read_root,
    ensure_db_present,
)

from .tree_builder import (
    BuildSummary,
    total_hash_ops,
    next_layer,
    build_layers,
    read_address_text,
    build_database,
    build_database_from_text,
)

from .proof_engine import (
    SiblingSide,
    ProofStep,
    ProofResult,
    build_proof,
    verify_proof_result,
)


__all__ = [
    # Address store
    "addresses_path",
    "prepare_addresses",
    "write_addresses",
    "address_count",
    "read_address",
    "find_address_index",
    # Layer store
    "layer_path",
    "layer_node_count",
    "read_node",
    "write_layers",
    "available_layers",
    "read_root",
    "ensure_db_present",
    # Builder
    "BuildSummary",
    "total_hash_ops",
    "next_layer",
    "build_layers",
    "read_address_text",
    "build_database",
    "build_database_from_text",
    # Proofs
    "SiblingSide",
    "ProofStep",
    "ProofResult",
    "build_proof",
    "verify_proof_result",
]
