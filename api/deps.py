"""
Module 04 - API Dependencies

Dependency injection for the API: the runtime configuration attached
to the application at creation time.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Request

from core.config.runtime import RuntimeConfig


def get_runtime_config(request: Request) -> RuntimeConfig:
    """RuntimeConfig the application was created with."""
    return request.app.state.config


def get_data_dir(request: Request) -> Path:
    """Tree directory served by this application."""
    return get_runtime_config(request).data_path
