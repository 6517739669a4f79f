from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
def health() -> Dict[str, str]:
    """
    Health endpoint minimale (non richiede API key).
    """
    return {"status": "ok"}
