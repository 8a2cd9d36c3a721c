"""
CLI command modules.
"""

from allowlist_cli.commands import accounts, build, generate, info, path, serve

__all__ = ["accounts", "build", "generate", "info", "path", "serve"]
