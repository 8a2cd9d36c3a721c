"""
Module 02 - Address Store
Flat file of fixed 20-byte address records, sorted and deduplicated.

Owner: Protocol/Crypto Engineer
Module ID: M02

File format (addresses.bin):
- Concatenation of 20-byte records, no header
- Strictly ascending byte-lexicographic order, no duplicates
- Record i sits at offset i * 20 and corresponds to leaf i of layer 0

Lookups never load the file: each binary-search comparison is an
independent seek + read, so memory use stays O(1) in the set size.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from core.schemas.constants import ADDRESS_SIZE, ADDRESSES_FILENAME
from core.schemas.errors import CorruptedDataError, FileIOError, IndexOutOfBoundsError


logger = logging.getLogger(__name__)


def addresses_path(db_dir: Path) -> Path:
    """Location of the address file inside a tree directory."""
    return Path(db_dir) / ADDRESSES_FILENAME


def prepare_addresses(addresses: Iterable[bytes]) -> list[bytes]:
    """
    Sort ascending and drop duplicates.

    This is what establishes the ordering invariant binary search relies
    on; it must run before anything is written.

    Raises:
        ValueError: If any address is not exactly 20 bytes
    """
    unique: set[bytes] = set()
    for address in addresses:
        if len(address) != ADDRESS_SIZE:
            raise ValueError(
                f"Address must be {ADDRESS_SIZE} bytes, got {len(address)}"
            )
        unique.add(bytes(address))
    return sorted(unique)


def write_addresses(path: Path, addresses: Iterable[bytes]) -> int:
    """
    Write one 20-byte record per address, in the given order.

    The caller is responsible for passing sorted, deduplicated input
    (see prepare_addresses).

    Returns:
        Number of records written
    """
    count = 0
    with open(path, "wb") as f:
        for address in addresses:
            f.write(address)
            count += 1
    logger.debug(f"Wrote {count} address records to {path}")
    return count


def _record_count(f: BinaryIO, path: Path) -> int:
    try:
        length = os.fstat(f.fileno()).st_size
    except OSError as e:
        raise FileIOError(f"Failed to stat {path}: {e}") from e
    if length % ADDRESS_SIZE != 0:
        raise CorruptedDataError(
            f"{ADDRESSES_FILENAME} is not a multiple of {ADDRESS_SIZE} bytes ({length})",
            details={"path": str(path), "length": length},
        )
    return length // ADDRESS_SIZE


def _read_record(f: BinaryIO, path: Path, index: int) -> bytes:
    try:
        f.seek(index * ADDRESS_SIZE)
        record = f.read(ADDRESS_SIZE)
    except OSError as e:
        raise FileIOError(f"Read failed in {path}: {e}") from e
    if len(record) != ADDRESS_SIZE:
        raise FileIOError(f"Short read in {path} at record {index}")
    return record


def address_count(path: Path) -> int:
    """Number of records in an address file."""
    try:
        with open(path, "rb") as f:
            return _record_count(f, path)
    except OSError as e:
        raise FileIOError(f"Failed to open {path}: {e}") from e


def read_address(path: Path, index: int) -> bytes:
    """
    Read the record at ``index``.

    Raises:
        IndexOutOfBoundsError: If index is outside [0, count)
        FileIOError: If the file cannot be opened or read
    """
    try:
        with open(path, "rb") as f:
            total = _record_count(f, path)
            if not 0 <= index < total:
                raise IndexOutOfBoundsError(level=0, index=index, count=total)
            return _read_record(f, path, index)
    except OSError as e:
        raise FileIOError(f"Failed to open {path}: {e}") from e


def find_address_index(
    path: Path,
    target: bytes,
) -> Optional[tuple[int, int, int]]:
    """
    Binary-search an address file for ``target``.

    Maintains a half-open window [low, high); each iteration reads the
    midpoint record and narrows the window until an exact match is found
    or the window is empty.

    Args:
        path: Path to addresses.bin
        target: 20 raw address bytes

    Returns:
        (index, lookups, total) on a match, where ``lookups`` is the
        number of record comparisons performed; None when the address is
        absent or the file is empty.

    Raises:
        FileIOError: If the file cannot be opened or read
        CorruptedDataError: If the length is not a multiple of 20
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileIOError(f"Failed to open {path}: {e}") from e

    with f:
        total = _record_count(f, path)
        if total == 0:
            return None

        low, high = 0, total
        lookups = 0
        while low < high:
            mid = (low + high) // 2
            record = _read_record(f, path, mid)
            lookups += 1
            if record < target:
                low = mid + 1
            elif record > target:
                high = mid
            else:
                logger.debug(
                    f"Found address at index {mid}/{total} after {lookups} lookups"
                )
                return mid, lookups, total

    logger.debug(f"Address not found after {lookups} lookups ({total} records)")
    return None


__all__ = [
    "addresses_path",
    "prepare_addresses",
    "write_addresses",
    "address_count",
    "read_address",
    "find_address_index",
]
