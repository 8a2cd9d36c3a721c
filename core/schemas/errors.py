"""
Module 00 - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for the allowlist Merkle engine.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.

Every core operation raises a MerkleException subclass instead of
aborting; callers inspect ``code`` or ``category`` to decide how to
present the failure (HTTP status, CLI exit code).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the engine."""

    # Input Errors
    INVALID_ADDRESS = "INVALID_ADDRESS"
    INVALID_HEX = "INVALID_HEX"

    # Lookup Errors
    ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"

    # Store Errors
    INVALID_LAYER = "INVALID_LAYER"
    FILE_IO = "FILE_IO"
    MISSING_LAYER = "MISSING_LAYER"
    CORRUPTED_DATA = "CORRUPTED_DATA"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"

    INTERNAL = "INTERNAL"


class ErrorCategory:
    """Coarse classification used by presentation layers."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Error model for passing engine failures without exceptions.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.ADDRESS_NOT_FOUND],
    )
    message: str = Field(..., description="Human-readable error message")
    category: str = Field(default=ErrorCategory.INTERNAL)
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            message=self.message,
            code=self.code,
            category=self.category,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle engine errors.

    Carries structured error information and can be converted to a
    MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INTERNAL,
        category: str = ErrorCategory.INTERNAL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.category = category
        self.details = details or {}

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            category=self.category,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidAddressError(MerkleException):
    """Address text is not 40 hex characters after an optional 0x."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=f"Invalid address: {message}",
            code=ErrorCodes.INVALID_ADDRESS,
            category=ErrorCategory.INVALID_INPUT,
        )


class InvalidHexError(MerkleException):
    """Address text contains non-hex characters."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=f"Invalid hex: {message}",
            code=ErrorCodes.INVALID_HEX,
            category=ErrorCategory.INVALID_INPUT,
        )


class AddressNotFoundError(MerkleException):
    """Binary search finished without an exact match."""

    def __init__(self, message: str = "Address not found in addresses.bin") -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ADDRESS_NOT_FOUND,
            category=ErrorCategory.NOT_FOUND,
        )


class InvalidLayerError(MerkleException):
    """Address count exceeds the configured safety ceiling."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Invalid layer: {message}",
            code=ErrorCodes.INVALID_LAYER,
            details=details,
        )


class FileIOError(MerkleException):
    """Opening, stat-ing, seeking or reading a store file failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"File I/O error: {message}",
            code=ErrorCodes.FILE_IO,
            details=details,
        )


class MissingLayerError(MerkleException):
    """A required store file (addresses.bin or a layer file) is absent."""

    def __init__(self, message: str, level: int | None = None) -> None:
        details = {"level": level} if level is not None else {}
        super().__init__(
            message=f"Missing layer: {message}",
            code=ErrorCodes.MISSING_LAYER,
            details=details,
        )


class CorruptedDataError(MerkleException):
    """A file length is not a multiple of its record size, or a layer is empty."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Corrupted data: {message}",
            code=ErrorCodes.CORRUPTED_DATA,
            details=details,
        )


class IndexOutOfBoundsError(MerkleException):
    """A path index exceeds the node count of its layer."""

    def __init__(self, level: int, index: int, count: int) -> None:
        self.level = level
        self.index = index
        self.count = count
        super().__init__(
            message=f"Index {index} out of bounds at level {level} (count: {count})",
            code=ErrorCodes.INDEX_OUT_OF_BOUNDS,
            details={"level": level, "index": index, "count": count},
        )


class InternalError(MerkleException):
    """Any other unexpected failure."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Internal error: {message}",
            code=ErrorCodes.INTERNAL,
            details=details,
        )


__all__ = [
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
