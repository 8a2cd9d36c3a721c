"""
Runtime Configuration

Central configuration for the proof server and the command-line tools.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.schemas.constants import DEFAULT_DATA_DIR, MAX_ADDRESSES

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "ALLOWLIST_"


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (ALLOWLIST_* prefix)
    - JSON file
    - Programmatic construction
    """
    data_dir: str = DEFAULT_DATA_DIR
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    log_file: Optional[str] = None
    max_addresses: int = MAX_ADDRESSES
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - ALLOWLIST_DATA_DIR: Tree directory (addresses.bin, layerNN.bin)
        - ALLOWLIST_HOST / ALLOWLIST_PORT: Proof server bind address
        - ALLOWLIST_LOG_LEVEL / ALLOWLIST_LOG_FILE: Logging
        - ALLOWLIST_MAX_ADDRESSES: Address-count safety ceiling
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}DATA_DIR"):
            overrides["data_dir"] = os.getenv(f"{ENV_PREFIX}DATA_DIR")
        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides["host"] = os.getenv(f"{ENV_PREFIX}HOST")
        if os.getenv(f"{ENV_PREFIX}PORT"):
            overrides["port"] = int(os.getenv(f"{ENV_PREFIX}PORT", "3000"))
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if os.getenv(f"{ENV_PREFIX}MAX_ADDRESSES"):
            overrides["max_addresses"] = int(
                os.getenv(f"{ENV_PREFIX}MAX_ADDRESSES", str(MAX_ADDRESSES))
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        defaults = cls()
        return cls(
            data_dir=str(data.get("data_dir", defaults.data_dir)),
            host=data.get("host", defaults.host),
            port=int(data.get("port", defaults.port)),
            log_level=data.get("log_level", defaults.log_level),
            log_file=data.get("log_file", defaults.log_file),
            max_addresses=int(data.get("max_addresses", defaults.max_addresses)),
            cors_origins=list(data.get("cors_origins", defaults.cors_origins)),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "data_dir": self.data_dir,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "max_addresses": self.max_addresses,
            "cors_origins": list(self.cors_origins),
        }


def default_config_paths() -> list[Path]:
    """Config file search order when no explicit path is given."""
    return [
        Path.cwd() / "allowlist.json",
        Path.cwd() / ".allowlist.json",
        Path.home() / ".config" / "allowlist" / "config.json",
    ]


def load_runtime_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from a file, then overlay environment variables.

    An explicit ``config_path`` must exist. Without one, the first file
    found in default_config_paths() is used, or defaults if none exist.
    Environment variables ALWAYS override file values.
    """
    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        config = RuntimeConfig()
        for path in default_config_paths():
            if path.exists():
                config = RuntimeConfig.from_file(path)
                break

    return config.with_env_overrides()


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the process-wide runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = load_runtime_config()
    return _default_config


def set_default_config(config: RuntimeConfig | None) -> None:
    """Set (or with None, reset) the process-wide runtime configuration."""
    global _default_config
    _default_config = config
