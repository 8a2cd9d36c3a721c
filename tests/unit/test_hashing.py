"""
Module 01 - Hashing Unit Tests
Tests for core/crypto/hashing.py

Covers:
1. Keccak-256 known vectors (Ethereum Keccak, not NIST SHA3-256)
2. Leaf and parent hashing rules
3. Hex display
"""
import hashlib

from core.crypto.hashing import (
    keccak256,
    hash_leaf,
    hash_pair,
    to_hex,
)


EMPTY_KECCAK = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
ABC_KECCAK = "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"


class TestKeccak256:
    """Tests for the raw Keccak-256 function."""

    def test_empty_input(self):
        assert keccak256(b"").hex() == EMPTY_KECCAK

    def test_abc(self):
        assert keccak256(b"abc").hex() == ABC_KECCAK

    def test_not_nist_sha3(self):
        """Keccak padding differs from the finalized SHA3-256 standard."""
        assert keccak256(b"") != hashlib.sha3_256(b"").digest()

    def test_digest_is_32_bytes(self):
        assert len(keccak256(b"\x00" * 1000)) == 32

    def test_deterministic(self):
        data = bytes(range(256))
        assert keccak256(data) == keccak256(data)


class TestLeafAndPair:
    """Tests for the tree hashing rules."""

    def test_leaf_hashes_raw_address_bytes(self):
        address = bytes([0x01]) * 20
        assert hash_leaf(address) == keccak256(address)

    def test_leaf_does_not_hash_hex_text(self):
        address = bytes([0xAB]) * 20
        assert hash_leaf(address) != keccak256(address.hex().encode())

    def test_pair_is_concatenation(self):
        left = keccak256(b"left")
        right = keccak256(b"right")
        assert hash_pair(left, right) == keccak256(left + right)

    def test_pair_is_order_sensitive(self):
        left = keccak256(b"left")
        right = keccak256(b"right")
        assert hash_pair(left, right) != hash_pair(right, left)

    def test_self_pair(self):
        node = keccak256(b"odd one out")
        assert hash_pair(node, node) == keccak256(node * 2)


class TestToHex:
    """Tests for hex display."""

    def test_prefix_and_case(self):
        assert to_hex(bytes.fromhex("DEADBEEF")) == "0xdeadbeef"

    def test_hash_length(self):
        assert len(to_hex(keccak256(b""))) == 66

    def test_empty(self):
        assert to_hex(b"") == "0x"
