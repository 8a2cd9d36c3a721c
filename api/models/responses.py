"""
Module 04 - API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.crypto.hashing import to_hex
from core.merkle.proof_engine import ProofResult


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    status: str = "ok"


class ProofNode(BaseModel):
    """One sibling step of an inclusion proof."""

    level: int = Field(..., description="Layer the sibling was read from")
    sibling_index: int = Field(..., description="Sibling position within its layer")
    side: str = Field(..., description="'left' or 'right' relative to the proved node")
    hash: str = Field(..., description="Sibling hash, 0x + 64 hex chars")


class ProofResponse(BaseModel):
    """Response for GET /proof/{address} endpoint."""

    address: str = Field(..., description="Queried address with 0x prefix")
    index: int = Field(..., description="Position in addresses.bin")
    total: int = Field(..., description="Number of addresses in the set")
    lookups: int = Field(..., description="Binary-search comparisons performed")
    leaf: str = Field(..., description="Leaf hash, 0x + 64 hex chars")
    root: str = Field(..., description="Root hash, 0x + 64 hex chars")
    root_level: int = Field(..., description="Level of the root layer")
    proof: list[ProofNode] = Field(default_factory=list)
    proof_flags: list[bool] = Field(
        default_factory=list,
        description="Parallel to proof: true where the sibling is on the left",
    )

    @classmethod
    def from_result(cls, result: ProofResult) -> "ProofResponse":
        return cls(
            address=result.normalized_address,
            index=result.index,
            total=result.total,
            lookups=result.lookups,
            leaf=to_hex(result.leaf),
            root=to_hex(result.root),
            root_level=result.root_level,
            proof=[
                ProofNode(
                    level=step.level,
                    sibling_index=step.sibling_index,
                    side=step.side.value,
                    hash=to_hex(step.sibling_hash),
                )
                for step in result.steps
            ],
            proof_flags=result.proof_flags,
        )


class InfoResponse(BaseModel):
    """Response for GET /info endpoint."""

    data_dir: str = Field(..., description="Directory the tree is served from")
    layer_count: int = Field(..., description="Number of layer files present")
    total: int = Field(..., description="Number of addresses in the set")
    root: str = Field(..., description="Root hash, 0x + 64 hex chars")
    root_level: int = Field(..., description="Level of the root layer")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Error code")
    details: dict[str, Any] = Field(default_factory=dict)
