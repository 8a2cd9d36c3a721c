"""
Module 02 - Layer Store Unit Tests
Tests for core/merkle/layer_store.py
"""
import pytest

from core.crypto.hashing import keccak256
from core.merkle.layer_store import (
    available_layers,
    ensure_db_present,
    layer_node_count,
    layer_path,
    read_node,
    read_root,
    write_layers,
)
from core.schemas.errors import (
    CorruptedDataError,
    ErrorCodes,
    FileIOError,
    IndexOutOfBoundsError,
    MissingLayerError,
)


def _nodes(count: int) -> list[bytes]:
    return [keccak256(bytes([i])) for i in range(count)]


class TestLayerFiles:
    """Tests for writing and reading fixed 32-byte records."""

    def test_file_names_zero_padded(self, tmp_path):
        assert layer_path(tmp_path, 0).name == "layer00.bin"
        assert layer_path(tmp_path, 7).name == "layer07.bin"
        assert layer_path(tmp_path, 12).name == "layer12.bin"

    def test_write_and_read_nodes(self, tmp_path):
        layer = _nodes(5)
        paths = write_layers(tmp_path, [layer, _nodes(3)])
        assert [p.name for p in paths] == ["layer00.bin", "layer01.bin"]
        assert layer_node_count(paths[0]) == 5
        for i, node in enumerate(layer):
            assert read_node(paths[0], i) == node

    def test_negative_index(self, tmp_path):
        write_layers(tmp_path, [_nodes(2)])
        with pytest.raises(IndexOutOfBoundsError):
            read_node(layer_path(tmp_path, 0), -1)

    def test_read_past_end(self, tmp_path):
        write_layers(tmp_path, [_nodes(2)])
        with pytest.raises(FileIOError):
            read_node(layer_path(tmp_path, 0), 2)

    def test_partial_node_is_corruption(self, tmp_path):
        path = layer_path(tmp_path, 0)
        path.write_bytes(b"\x00" * 33)
        with pytest.raises(CorruptedDataError) as exc_info:
            layer_node_count(path)
        assert exc_info.value.code == ErrorCodes.CORRUPTED_DATA

    def test_missing_file_count(self, tmp_path):
        with pytest.raises(FileIOError):
            layer_node_count(layer_path(tmp_path, 0))


class TestAvailableLayers:
    """Tests for sequential layer probing."""

    def test_none(self, tmp_path):
        assert available_layers(tmp_path) == []

    def test_contiguous(self, tmp_path):
        write_layers(tmp_path, [_nodes(4), _nodes(2), _nodes(1)])
        assert len(available_layers(tmp_path)) == 3

    def test_stops_at_gap(self, tmp_path):
        write_layers(tmp_path, [_nodes(4), _nodes(2), _nodes(1)])
        layer_path(tmp_path, 1).unlink()
        assert [p.name for p in available_layers(tmp_path)] == ["layer00.bin"]


class TestReadRoot:
    """Tests for reading the root from the highest layer."""

    def test_root_and_level(self, tmp_path):
        top = _nodes(1)
        write_layers(tmp_path, [_nodes(2), top])
        assert read_root(tmp_path) == (top[0], 1)

    def test_no_layers(self, tmp_path):
        with pytest.raises(MissingLayerError):
            read_root(tmp_path)

    def test_top_layer_with_two_nodes(self, tmp_path):
        write_layers(tmp_path, [_nodes(4), _nodes(2)])
        with pytest.raises(CorruptedDataError, match="expected exactly 1"):
            read_root(tmp_path)


class TestEnsureDbPresent:
    """Tests for the startup presence check."""

    def test_complete(self, three_address_db):
        ensure_db_present(three_address_db)

    def test_missing_addresses(self, three_address_db):
        (three_address_db / "addresses.bin").unlink()
        with pytest.raises(MissingLayerError, match="addresses file"):
            ensure_db_present(three_address_db)

    def test_missing_first_layer(self, three_address_db):
        layer_path(three_address_db, 0).unlink()
        with pytest.raises(MissingLayerError, match="layer00.bin"):
            ensure_db_present(three_address_db)
