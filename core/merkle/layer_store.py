"""
Module 02 - Layer Store
One flat file of fixed 32-byte hash records per tree level.

Owner: Protocol/Crypto Engineer
Module ID: M02

File format (layerNN.bin, NN = zero-padded level starting at 00):
- Concatenation of 32-byte hashes, no header, no index
- Node i sits at offset i * 32
- layer00.bin holds the leaf hashes in address-file order
- The highest present level holds exactly one record: the root

Files are written once by the tree builder and only read afterwards.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from core.schemas.constants import (
    ADDRESSES_FILENAME,
    HASH_SIZE,
    LAYER_FILENAME_TEMPLATE,
    MAX_LAYERS,
)
from core.schemas.errors import (
    CorruptedDataError,
    FileIOError,
    IndexOutOfBoundsError,
    MissingLayerError,
)


logger = logging.getLogger(__name__)


def layer_path(db_dir: Path, level: int) -> Path:
    """Location of the file for ``level`` inside a tree directory."""
    return Path(db_dir) / LAYER_FILENAME_TEMPLATE.format(level=level)


def layer_node_count(path: Path) -> int:
    """
    Number of 32-byte nodes stored in a layer file.

    Raises:
        FileIOError: If the file cannot be opened or stat-ed
        CorruptedDataError: If the length is not a multiple of 32
    """
    try:
        length = os.stat(path).st_size
    except OSError as e:
        raise FileIOError(f"Failed to read {path}: {e}") from e
    if length % HASH_SIZE != 0:
        raise CorruptedDataError(
            f"Layer file {path} is not a multiple of {HASH_SIZE} bytes ({length})",
            details={"path": str(path), "length": length},
        )
    return length // HASH_SIZE


def read_node(path: Path, index: int, level: int = 0) -> bytes:
    """
    Read the 32-byte node at ``index`` with a single seek + read.

    Raises:
        IndexOutOfBoundsError: If index is negative
        FileIOError: If the file cannot be opened, or the read comes up short
    """
    if index < 0:
        raise IndexOutOfBoundsError(level=level, index=index, count=0)
    try:
        with open(path, "rb") as f:
            f.seek(index * HASH_SIZE)
            node = f.read(HASH_SIZE)
    except OSError as e:
        raise FileIOError(f"Unable to read {path}: {e}") from e
    if len(node) != HASH_SIZE:
        raise FileIOError(f"Read failed in {path}: no node at index {index}")
    return node


def write_layers(db_dir: Path, layers: Sequence[Sequence[bytes]]) -> list[Path]:
    """
    Persist every layer as layerNN.bin in construction order.

    Returns:
        Paths written, level 0 first
    """
    paths: list[Path] = []
    for level, layer in enumerate(layers):
        path = layer_path(db_dir, level)
        with open(path, "wb") as f:
            for node in layer:
                f.write(node)
        logger.debug(f"Wrote layer {level:02d} ({len(layer)} nodes) to {path}")
        paths.append(path)
    return paths


def available_layers(db_dir: Path) -> list[Path]:
    """
    Probe layer00.bin, layer01.bin, ... until one is missing.

    Probing stops after MAX_LAYERS + 1 files so a corrupted filesystem
    cannot cause an unbounded scan.
    """
    layers: list[Path] = []
    for level in range(MAX_LAYERS + 1):
        path = layer_path(db_dir, level)
        if not path.exists():
            break
        layers.append(path)
    return layers


def read_root(db_dir: Path) -> tuple[bytes, int]:
    """
    Read the root hash and its level from the highest present layer.

    Raises:
        MissingLayerError: If no layer files exist
        CorruptedDataError: If the highest layer does not hold exactly one node
    """
    layers = available_layers(db_dir)
    if not layers:
        raise MissingLayerError(
            "No layer files found (expected layer00.bin, layer01.bin, ...)",
            level=0,
        )
    top = layers[-1]
    count = layer_node_count(top)
    if count != 1:
        raise CorruptedDataError(
            f"Top layer {top.name} holds {count} nodes, expected exactly 1",
            details={"path": str(top), "count": count},
        )
    return read_node(top, 0, level=len(layers) - 1), len(layers) - 1


def ensure_db_present(db_dir: Path) -> None:
    """
    Check that the minimum files of a built tree exist.

    Raises:
        MissingLayerError: If addresses.bin or layer00.bin is absent
    """
    db_dir = Path(db_dir)
    addresses = db_dir / ADDRESSES_FILENAME
    if not addresses.exists():
        raise MissingLayerError(f"Missing addresses file at {addresses}")

    first_layer = layer_path(db_dir, 0)
    if not first_layer.exists():
        raise MissingLayerError(
            f"Missing first layer file at {first_layer} (expected layer00.bin)",
            level=0,
        )


__all__ = [
    "layer_path",
    "layer_node_count",
    "read_node",
    "write_layers",
    "available_layers",
    "read_root",
    "ensure_db_present",
]
