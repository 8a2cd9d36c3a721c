"""
Module 04 - Proof API (FastAPI)

HTTP API serving inclusion proofs from a built tree directory:
- GET /proof/{address} - Inclusion proof
- GET /info - Tree metadata
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
