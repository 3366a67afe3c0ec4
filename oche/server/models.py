# oche/server/models.py
"""Pydantic models for API requests/responses."""

from typing import Any

from pydantic import BaseModel


class MatchSubmission(BaseModel):
    """A match result as entered on the form.

    Fields stay loosely typed; the ladder validates them and reports
    user-facing errors itself.
    """

    player_name: Any = None
    opponent_name: Any = None
    winner: Any = None
    checkout: Any = None


class MatchResponse(BaseModel):
    """Response to a recorded match."""

    message: str
    outcome: dict[str, Any]
    standings: list[dict[str, Any]]


class ResetRequest(BaseModel):
    """Passphrase-gated reset."""

    passphrase: str = ""


class ResetResponse(BaseModel):
    status: str
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    players: int
    uptime_s: float
