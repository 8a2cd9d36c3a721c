"""
Module 00 - Schemas
File: __init__.py

Purpose: Export record-size constants and the error taxonomy shared by
every layer of the allowlist Merkle engine.
"""

from .constants import (
    ADDRESS_SIZE,
    ADDRESS_HEX_LENGTH,
    HASH_SIZE,
    MAX_ADDRESSES,
    MAX_LAYERS,
    ADDRESSES_FILENAME,
    LAYER_FILENAME_TEMPLATE,
    DEFAULT_DATA_DIR,
)

from .errors import (
    ErrorCodes,
    ErrorCategory,
    MerkleError,
    MerkleException,
    InvalidAddressError,
    InvalidHexError,
    AddressNotFoundError,
    InvalidLayerError,
    FileIOError,
    MissingLayerError,
    CorruptedDataError,
    IndexOutOfBoundsError,
    InternalError,
)

__all__ = [
    # Constants
    "ADDRESS_SIZE",
    "ADDRESS_HEX_LENGTH",
    "HASH_SIZE",
    "MAX_ADDRESSES",
    "MAX_LAYERS",
    "ADDRESSES_FILENAME",
    "LAYER_FILENAME_TEMPLATE",
    "DEFAULT_DATA_DIR",
    # Errors
    "ErrorCodes",
    "ErrorCategory",
    "MerkleError",
    "MerkleException",
    "InvalidAddressError",
    "InvalidHexError",
    "AddressNotFoundError",
    "InvalidLayerError",
    "FileIOError",
    "MissingLayerError",
    "CorruptedDataError",
    "IndexOutOfBoundsError",
    "InternalError",
]
