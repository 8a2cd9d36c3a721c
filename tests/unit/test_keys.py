"""
Module 01 - Key Derivation Unit Tests
Tests for core/crypto/keys.py
"""
import random

import pytest
from eth_keys import keys

from core.crypto.checksum import is_checksum_address
from core.crypto.keys import (
    SECP256K1_N,
    address_from_private_key,
    derive_address,
    generate_account,
    generate_test_accounts,
)


# Well-known addresses for private keys 1 and 2
KEY_ONE_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
KEY_TWO_ADDRESS = "0x2B5AD5c4795c026514f8317c7a215E218DcCD6cF"


def _key(value: int) -> bytes:
    return value.to_bytes(32, "big")


class TestAddressDerivation:
    """Tests for public key -> address."""

    def test_private_key_one(self):
        assert address_from_private_key(_key(1)) == KEY_ONE_ADDRESS

    def test_private_key_two(self):
        assert address_from_private_key(_key(2)) == KEY_TWO_ADDRESS

    def test_sec1_and_bare_forms_agree(self):
        bare = keys.PrivateKey(_key(1)).public_key.to_bytes()
        assert len(bare) == 64
        assert derive_address(b"\x04" + bare) == derive_address(bare)
        assert derive_address(bare) == KEY_ONE_ADDRESS

    def test_compressed_key_rejected(self):
        with pytest.raises(ValueError, match="64 or 65 bytes"):
            derive_address(b"\x02" + bytes(32))

    def test_bad_format_byte_rejected(self):
        with pytest.raises(ValueError, match="0x04"):
            derive_address(b"\x05" + bytes(64))


class TestAccountGeneration:
    """Tests for generated key pairs."""

    def test_generated_account_is_consistent(self):
        account = generate_account()
        private_key = bytes.fromhex(account.private_key[2:])
        assert 0 < int.from_bytes(private_key, "big") < SECP256K1_N
        assert address_from_private_key(private_key) == account.address
        assert is_checksum_address(account.address)

    def test_seeded_rng_is_reproducible(self):
        first = generate_account(random.Random(7))
        second = generate_account(random.Random(7))
        assert first == second

    def test_test_accounts_deterministic(self):
        assert generate_test_accounts(3, seed=42) == generate_test_accounts(3, seed=42)

    def test_test_accounts_differ_by_seed(self):
        assert generate_test_accounts(2, seed=1) != generate_test_accounts(2, seed=2)

    def test_test_accounts_distinct(self):
        accounts = generate_test_accounts(5)
        assert len({a.address for a in accounts}) == 5

    def test_to_dict_shape(self):
        account = generate_test_accounts(1)[0]
        assert set(account.to_dict()) == {"address", "private_key"}
        assert len(account.private_key) == 66

    def test_zero_count_rejected(self):
        with pytest.raises(ValueError, match="greater than zero"):
            generate_test_accounts(0)
