"""
Module 01 - Key Pairs and Address Derivation

Derives checksum addresses from secp256k1 public keys and generates
key pairs for test fixtures. Nothing here touches the Merkle tree; it
only shares the checksum formatter.
"""
from __future__ import annotations

import random
import secrets
from dataclasses import asdict, dataclass
from typing import Any

from eth_keys import keys

from core.crypto.checksum import to_checksum_address
from core.crypto.hashing import keccak256
from core.schemas.constants import ADDRESS_SIZE


# secp256k1 group order; valid private keys lie in [1, N)
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

DEFAULT_ACCOUNT_SEED = 42


@dataclass(frozen=True)
class TestAccount:
    """A generated key pair, serialized as {"address", "private_key"}."""

    __test__ = False  # not a pytest class

    address: str
    private_key: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def derive_address(public_key: bytes) -> str:
    """
    Derive the checksum address of an uncompressed public key.

    Accepts either the 65-byte SEC1 encoding (leading 0x04 format byte)
    or the bare 64-byte X||Y form. The address is the low 20 bytes of
    keccak256(X||Y).

    Raises:
        ValueError: If the key is not 64 or 65 bytes, or a 65-byte key
                   does not start with 0x04
    """
    if len(public_key) == 65:
        if public_key[0] != 0x04:
            raise ValueError("Uncompressed public key must start with 0x04")
        public_key = public_key[1:]
    elif len(public_key) != 64:
        raise ValueError(
            f"Public key must be 64 or 65 bytes, got {len(public_key)}"
        )

    digest = keccak256(public_key)
    return to_checksum_address(digest[-ADDRESS_SIZE:])


def address_from_private_key(private_key: bytes) -> str:
    """Compute the checksum address controlled by a 32-byte private key."""
    public_key = keys.PrivateKey(private_key).public_key
    return derive_address(public_key.to_bytes())


def _random_private_key(rng: random.Random | None) -> bytes:
    while True:
        if rng is None:
            candidate = secrets.token_bytes(32)
        else:
            candidate = rng.getrandbits(256).to_bytes(32, "big")
        value = int.from_bytes(candidate, "big")
        if 0 < value < SECP256K1_N:
            return candidate


def generate_account(rng: random.Random | None = None) -> TestAccount:
    """
    Generate one key pair.

    With ``rng=None`` the key comes from the OS CSPRNG; pass a seeded
    ``random.Random`` for reproducible fixtures.
    """
    private_key = _random_private_key(rng)
    return TestAccount(
        address=address_from_private_key(private_key),
        private_key="0x" + private_key.hex(),
    )


def generate_test_accounts(count: int, seed: int = DEFAULT_ACCOUNT_SEED) -> list[TestAccount]:
    """
    Generate ``count`` deterministic key pairs from ``seed``.

    The same seed always yields the same accounts, in the same order.
    These keys are for fixtures only and must never hold real funds.
    """
    if count <= 0:
        raise ValueError("Count must be greater than zero")
    rng = random.Random(seed)
    return [generate_account(rng) for _ in range(count)]


__all__ = [
    "SECP256K1_N",
    "DEFAULT_ACCOUNT_SEED",
    "TestAccount",
    "derive_address",
    "address_from_private_key",
    "generate_account",
    "generate_test_accounts",
]
