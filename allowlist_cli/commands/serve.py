"""
Module 05 - CLI Serve Command

Serve inclusion proofs over HTTP.

Usage:
    allowlist serve [--host 127.0.0.1] [--port 3000] [--data-dir merkledb]
"""

from __future__ import annotations

import copy
import logging
from argparse import Namespace

from allowlist_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    print_error,
    resolve_data_dir,
)
from core.config.runtime import RuntimeConfig
from core.merkle.layer_store import available_layers, ensure_db_present
from core.schemas.errors import MerkleException


logger = logging.getLogger(__name__)


def serve_cmd(args: Namespace) -> int:
    """
    Execute the serve command.

    The presence check runs before the server binds, so a directory
    without a built tree never starts serving.
    """
    from api.app import run_server

    config: RuntimeConfig = copy.deepcopy(getattr(args, "cli_config", None) or RuntimeConfig())
    config.data_dir = str(resolve_data_dir(args))
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port

    try:
        ensure_db_present(config.data_path)
    except MerkleException as e:
        print_error(e.message)
        return EXIT_RUNTIME_ERROR

    layer_count = len(available_layers(config.data_path))
    logger.info(
        f"Serving Merkle API from {config.data_path} ({layer_count} layer files) "
        f"on http://{config.host}:{config.port}"
    )
    logger.info(f"CORS enabled for origins: {', '.join(config.cors_origins)}")

    run_server(config)
    return EXIT_SUCCESS
