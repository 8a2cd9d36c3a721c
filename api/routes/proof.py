"""
Module 04 - Proof Routes

Inclusion proofs and tree metadata.

Handlers are plain (non-async) functions: the engine does blocking file
reads, so FastAPI runs each request in its worker thread pool. Requests
share no state and open their own file handles.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends

from api.deps import get_data_dir, get_runtime_config
from api.models.responses import ErrorResponse, InfoResponse, ProofResponse
from core.config.runtime import RuntimeConfig
from core.crypto.hashing import to_hex
from core.merkle.address_store import address_count, addresses_path
from core.merkle.layer_store import available_layers, ensure_db_present, read_root
from core.merkle.proof_engine import build_proof


logger = logging.getLogger(__name__)

router = APIRouter(tags=["proofs"])


@router.get(
    "/proof/{address}",
    response_model=ProofResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed address"},
        404: {"model": ErrorResponse, "description": "Address not in the set"},
        500: {"model": ErrorResponse, "description": "Missing or corrupted tree files"},
    },
)
def get_proof(
    address: str,
    config: RuntimeConfig = Depends(get_runtime_config),
) -> ProofResponse:
    """
    Build the inclusion proof for an address.

    The address may be given with or without 0x, in any letter case.
    """
    result = build_proof(config.data_path, address, max_addresses=config.max_addresses)
    logger.debug(
        f"Proof for {result.normalized_address}: index={result.index} "
        f"steps={len(result.steps)} lookups={result.lookups}"
    )
    return ProofResponse.from_result(result)


@router.get(
    "/info",
    response_model=InfoResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_info(data_dir: Path = Depends(get_data_dir)) -> InfoResponse:
    """Report the served tree's size, depth and root."""
    ensure_db_present(data_dir)
    root, root_level = read_root(data_dir)
    return InfoResponse(
        data_dir=str(data_dir),
        layer_count=len(available_layers(data_dir)),
        total=address_count(addresses_path(data_dir)),
        root=to_hex(root),
        root_level=root_level,
    )
