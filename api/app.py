"""
Module 04 - FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or through the CLI, which runs the presence check first
    allowlist serve --data-dir merkledb --port 3000
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import generic_error_handler, merkle_error_handler
from api.routes import health, proof
from core.config.runtime import RuntimeConfig, get_default_config
from core.schemas.errors import MerkleException


logger = logging.getLogger(__name__)


def configure_logging(config: RuntimeConfig) -> None:
    """Configure root logging from the runtime config, defaulting to INFO."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def create_app(config: RuntimeConfig | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Runtime configuration; defaults to the process-wide one
                (config file + ALLOWLIST_* environment variables)
    """
    config = config or get_default_config()

    app = FastAPI(
        title="Allowlist Merkle Proof API",
        description="""
HTTP API serving inclusion proofs from a disk-resident Merkle tree.

## Endpoints

- **GET /proof/{address}** - Inclusion proof for an address
- **GET /info** - Size, depth and root of the served tree
- **GET /health** - Health check

Each proof step carries the sibling hash and its side; replaying
keccak256 over the steps from the leaf reproduces the root.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MerkleException, merkle_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(health.router)
    app.include_router(proof.router)

    return app


def run_server(config: RuntimeConfig) -> None:
    """Serve the API with uvicorn until interrupted."""
    import uvicorn

    uvicorn.run(create_app(config), host=config.host, port=config.port, log_config=None)


# Create the application instance
app = create_app()


if __name__ == "__main__":
    configure_logging(app.state.config)
    run_server(app.state.config)
