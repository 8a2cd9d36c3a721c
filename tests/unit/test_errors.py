"""
Module 00 - Error Taxonomy Unit Tests
Tests for core/schemas/errors.py
"""
import pytest

from core.schemas.errors import (
    AddressNotFoundError,
    CorruptedDataError,
    ErrorCategory,
    ErrorCodes,
    FileIOError,
    IndexOutOfBoundsError,
    InternalError,
    InvalidAddressError,
    InvalidHexError,
    InvalidLayerError,
    MerkleError,
    MerkleException,
    MissingLayerError,
)


class TestCategories:
    """Each error kind maps to one presentation category."""

    @pytest.mark.parametrize(
        "exc, category",
        [
            (InvalidAddressError("x"), ErrorCategory.INVALID_INPUT),
            (InvalidHexError("x"), ErrorCategory.INVALID_INPUT),
            (AddressNotFoundError(), ErrorCategory.NOT_FOUND),
            (InvalidLayerError("x"), ErrorCategory.INTERNAL),
            (FileIOError("x"), ErrorCategory.INTERNAL),
            (MissingLayerError("x"), ErrorCategory.INTERNAL),
            (CorruptedDataError("x"), ErrorCategory.INTERNAL),
            (IndexOutOfBoundsError(level=1, index=4, count=2), ErrorCategory.INTERNAL),
            (InternalError("x"), ErrorCategory.INTERNAL),
        ],
    )
    def test_category(self, exc, category):
        assert isinstance(exc, MerkleException)
        assert exc.category == category


class TestMessages:
    """Messages carry a kind prefix so logs read on their own."""

    def test_prefixes(self):
        assert str(InvalidAddressError("too short")) == "Invalid address: too short"
        assert str(InvalidHexError("bad")) == "Invalid hex: bad"
        assert str(FileIOError("boom")) == "File I/O error: boom"
        assert str(MissingLayerError("gone")) == "Missing layer: gone"
        assert str(CorruptedDataError("odd")) == "Corrupted data: odd"
        assert str(InternalError("oops")) == "Internal error: oops"

    def test_missing_layer_level_detail(self):
        assert MissingLayerError("gone", level=3).details == {"level": 3}
        assert MissingLayerError("gone").details == {}

    def test_index_out_of_bounds(self):
        err = IndexOutOfBoundsError(level=2, index=9, count=4)
        assert err.code == ErrorCodes.INDEX_OUT_OF_BOUNDS
        assert err.details == {"level": 2, "index": 9, "count": 4}
        assert "Index 9 out of bounds at level 2 (count: 4)" == err.message

    def test_repr(self):
        assert repr(AddressNotFoundError()).startswith("AddressNotFoundError(code='ADDRESS_NOT_FOUND'")


class TestErrorModel:
    """Conversion between exceptions and the pydantic model."""

    def test_to_error_model(self):
        model = CorruptedDataError("odd", details={"length": 33}).to_error_model()
        assert model.code == ErrorCodes.CORRUPTED_DATA
        assert model.category == ErrorCategory.INTERNAL
        assert model.details == {"length": 33}

    def test_round_trip_keeps_fields(self):
        exc = MerkleError(
            code=ErrorCodes.ADDRESS_NOT_FOUND,
            message="nope",
            category=ErrorCategory.NOT_FOUND,
        ).to_exception()
        assert isinstance(exc, MerkleException)
        assert exc.code == ErrorCodes.ADDRESS_NOT_FOUND
        assert exc.category == ErrorCategory.NOT_FOUND
        assert exc.message == "nope"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            MerkleError(code="X", message="y", unexpected=True)
