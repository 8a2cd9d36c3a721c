"""
Module 01 - Address Checksum Encoding
Parsing and mixed-case checksum formatting of 20-byte addresses.

Owner: Protocol/Crypto Engineer
Module ID: M01

Checksum rule (EIP-55):
1. Lowercase-hex-encode the 20 address bytes (40 characters)
2. Hash the ASCII hex text (not the raw bytes) with Keccak-256
3. For each hex letter at position i, uppercase it when nibble i of the
   hash (high nibble for even i, low nibble for odd i) is >= 8
4. Digits are always left as-is
"""
from __future__ import annotations

import re

from core.crypto.hashing import keccak256
from core.schemas.constants import ADDRESS_HEX_LENGTH, ADDRESS_SIZE
from core.schemas.errors import InvalidAddressError, InvalidHexError


_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def _strip_prefix(raw: str) -> str:
    if raw.startswith("0x") or raw.startswith("0X"):
        return raw[2:]
    return raw


def to_checksum_address(address: bytes) -> str:
    """
    Format a raw address as a 0x-prefixed checksum string.

    Args:
        address: 20 raw address bytes

    Returns:
        42-character string, e.g. "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    Raises:
        ValueError: If address is not exactly 20 bytes
    """
    if len(address) != ADDRESS_SIZE:
        raise ValueError(
            f"Address must be {ADDRESS_SIZE} bytes, got {len(address)}"
        )

    hex_address = address.hex()
    digest = keccak256(hex_address.encode("ascii"))

    chars: list[str] = []
    for i, ch in enumerate(hex_address):
        if ch.isdigit():
            chars.append(ch)
            continue
        hash_byte = digest[i // 2]
        nibble = hash_byte >> 4 if i % 2 == 0 else hash_byte & 0x0F
        chars.append(ch.upper() if nibble >= 8 else ch)

    return "0x" + "".join(chars)


def parse_address(raw: str) -> bytes:
    """
    Parse address text into 20 raw bytes.

    Accepts an optional case-insensitive 0x prefix and any letter case.

    Raises:
        InvalidAddressError: If the text is not 40 characters after the prefix
        InvalidHexError: If the text contains non-hex characters
    """
    cleaned = _strip_prefix(raw)
    if len(cleaned) != ADDRESS_HEX_LENGTH:
        raise InvalidAddressError(
            f"Address must be {ADDRESS_HEX_LENGTH} hex characters after 0x"
        )
    # bytes.fromhex() tolerates whitespace, so validate the alphabet first
    if not _HEX_RE.fullmatch(cleaned):
        raise InvalidHexError("Invalid hex in address")
    return bytes.fromhex(cleaned)


def normalize_hex(raw: str) -> str:
    """
    Ensure a lowercase 0x prefix for display without touching the digits.

    Example:
        >>> normalize_hex("0X1234")
        '0x1234'
    """
    if raw.startswith("0x"):
        return raw
    if raw.startswith("0X"):
        return "0x" + raw[2:]
    return "0x" + raw


def is_checksum_address(raw: str) -> bool:
    """Return True if ``raw`` is a 0x-prefixed address in exact checksum case."""
    try:
        address = parse_address(raw)
    except (InvalidAddressError, InvalidHexError):
        return False
    return raw == to_checksum_address(address)


__all__ = [
    "to_checksum_address",
    "parse_address",
    "normalize_hex",
    "is_checksum_address",
]
