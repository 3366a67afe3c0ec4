# oche/server/routes/admin.py
"""Passphrase-gated reset endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from oche.ladder import LadderService

from ..models import ResetRequest, ResetResponse
from .ladder import get_ladder

router = APIRouter(prefix="/api", tags=["admin"])


@router.post("/reset", response_model=ResetResponse)
def reset_ladder(body: ResetRequest, ladder: LadderService = Depends(get_ladder)) -> ResetResponse:
    """Clear every player, match and ranking snapshot.

    A wrong passphrase is answered with 403 and nothing changes.
    """
    ladder.reset(body.passphrase)
    return ResetResponse(status="cleared", message="All data cleared.")
