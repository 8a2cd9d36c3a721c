"""
Test fixtures package for allowlist Merkle tests.

Usage:
    from fixtures import make_address, make_tree

    def test_something(tmp_path):
        make_tree(tmp_path, [make_address(1), make_address(2)])
"""

from .common import (
    make_address,
    make_addresses,
    write_address_file,
    make_tree,
)

__all__ = [
    "make_address",
    "make_addresses",
    "write_address_file",
    "make_tree",
]
