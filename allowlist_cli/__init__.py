"""
Module 05 - Allowlist CLI

Command-line interface for building and querying allowlist Merkle trees.

Usage:
    python -m allowlist_cli build addresses.txt --out merkledb
    python -m allowlist_cli path 0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed
    python -m allowlist_cli serve --port 3000
    python -m allowlist_cli accounts --count 100 --output accounts.json
"""

__version__ = "0.1.0"
