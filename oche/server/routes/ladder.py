# oche/server/routes/ladder.py
"""Leaderboard, match and player endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from oche.ladder import LadderService

from ..models import MatchResponse, MatchSubmission

logger = logging.getLogger("oche.server")

router = APIRouter(prefix="/api", tags=["ladder"])


def get_ladder(request: Request) -> LadderService:
    ladder = getattr(request.app.state, "ladder", None)
    if ladder is None:
        raise HTTPException(503, "Ladder not initialized")
    return ladder


@router.get("/standings")
def get_standings(ladder: LadderService = Depends(get_ladder)) -> list[dict[str, Any]]:
    """Get the ranked leaderboard. Recomputes rank movement and saves the snapshot."""
    return [r.to_dict() for r in ladder.standings()]


@router.get("/matches")
def get_matches(ladder: LadderService = Depends(get_ladder)) -> list[dict[str, Any]]:
    """Get recent matches, newest first."""
    return [m.to_dict() for m in ladder.recent_matches()]


@router.post("/matches", status_code=201, response_model=MatchResponse)
def post_match(submission: MatchSubmission, ladder: LadderService = Depends(get_ladder)) -> MatchResponse:
    """Record a match result and return the re-ranked leaderboard."""
    outcome, ranking = ladder.record_match(
        submission.player_name,
        submission.opponent_name,
        submission.winner,
        submission.checkout,
    )
    return MatchResponse(
        message=outcome.summary(),
        outcome=outcome.to_dict(),
        standings=[r.to_dict() for r in ranking],
    )


@router.get("/players/{name}")
def get_player(name: str, ladder: LadderService = Depends(get_ladder)) -> dict[str, Any]:
    """Get one player by name (case and surrounding whitespace ignored)."""
    player = ladder.get_player(name)
    if player is None:
        raise HTTPException(404, f"Player '{name}' not found")
    return player.as_dict()
