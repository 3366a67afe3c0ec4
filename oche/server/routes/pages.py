# oche/server/routes/pages.py
"""HTML leaderboard page and its form handlers.

Form posts redirect back to the page with a status message, so every
submission is followed by a fresh render of the leaderboard.
"""

from __future__ import annotations

from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from oche.ladder import LadderService
from oche.ladder.errors import LadderError

from ..render import render_page
from .ladder import get_ladder

router = APIRouter(tags=["pages"])


def _back_to_page(message: str, *, is_error: bool = False) -> RedirectResponse:
    query = {"message": message}
    if is_error:
        query["error"] = "1"
    return RedirectResponse(f"/?{urlencode(query)}", status_code=303)


@router.get("/", response_class=HTMLResponse)
def get_leaderboard_page(
    ladder: LadderService = Depends(get_ladder),
    message: str = "",
    error: bool = False,
) -> HTMLResponse:
    """Serve the leaderboard page. Each render moves the ranking snapshot forward."""
    ranking = ladder.standings()
    return HTMLResponse(render_page(ranking, ladder.recent_matches(), message=message, is_error=error))


@router.post("/matches")
def submit_match_form(
    player_name: Annotated[str, Form()] = "",
    opponent_name: Annotated[str, Form()] = "",
    winner: Annotated[str, Form()] = "",
    checkout: Annotated[str, Form()] = "",
    ladder: LadderService = Depends(get_ladder),
) -> RedirectResponse:
    try:
        outcome, _ = ladder.record_match(player_name, opponent_name, winner, checkout)
    except LadderError as e:
        return _back_to_page(e.message, is_error=True)
    return _back_to_page(outcome.summary())


@router.post("/reset")
def submit_reset_form(
    passphrase: Annotated[str, Form()] = "",
    ladder: LadderService = Depends(get_ladder),
) -> RedirectResponse:
    try:
        ladder.reset(passphrase)
    except LadderError as e:
        return _back_to_page(e.message, is_error=True)
    return _back_to_page("All data cleared.")
