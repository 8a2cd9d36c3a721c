"""
Module 01 - Hashing Utilities
Keccak-256 hashing and hex helpers for the allowlist Merkle tree.

Owner: Protocol/Crypto Engineer
Module ID: M01

This module provides:
- Keccak-256 hashing for raw bytes (Ethereum flavour, not NIST SHA3-256)
- Leaf hashing for 20-byte addresses
- Parent hashing for pairs of 32-byte nodes
- 0x-prefixed hex display of hashes

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- Leaves are hashed from the raw 20 address bytes, never from the hex text
- All operations are deterministic
"""
from __future__ import annotations

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """
    Compute the Keccak-256 digest of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte Keccak-256 digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    hasher = keccak.new(digest_bits=256)
    hasher.update(data)
    return hasher.digest()


def hash_leaf(address: bytes) -> bytes:
    """
    Compute the leaf hash for a raw address.

    Rule: leaf = keccak256(address)

    Args:
        address: 20 raw address bytes

    Returns:
        32-byte leaf hash
    """
    return keccak256(address)


def hash_pair(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two child nodes.

    Rule: parent = keccak256(left || right). An unpaired node at the end
    of an odd-length layer is passed as both ``left`` and ``right``.
    """
    return keccak256(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


__all__ = [
    "keccak256",
    "hash_leaf",
    "hash_pair",
    "to_hex",
]
