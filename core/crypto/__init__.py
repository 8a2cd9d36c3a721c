"""
Core cryptographic utilities.

Keccak-256 hashing, address checksum encoding and key-pair helpers.
"""
from .hashing import (
    keccak256,
    hash_leaf,
    hash_pair,
    to_hex,
)
from .checksum import (
    to_checksum_address,
    parse_address,
    normalize_hex,
    is_checksum_address,
)

__all__ = [
    "keccak256",
    "hash_leaf",
    "hash_pair",
    "to_hex",
    "to_checksum_address",
    "parse_address",
    "normalize_hex",
    "is_checksum_address",
]
