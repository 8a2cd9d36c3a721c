"""API response models."""

from api.models.responses import (
    HealthResponse,
    ProofNode,
    ProofResponse,
    InfoResponse,
    ErrorResponse,
)

__all__ = [
    "HealthResponse",
    "ProofNode",
    "ProofResponse",
    "InfoResponse",
    "ErrorResponse",
]
