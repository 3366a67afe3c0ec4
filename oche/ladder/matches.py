from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..constants import MATCH_HISTORY_LIMIT, MAX_CHECKOUT, MAX_TIMESTAMP
from .elo import EloConfig, expected_score, update_rating
from .errors import DuplicatePlayerError, InvalidCheckoutError, InvalidWinnerError
from .players import as_int, normalize_name, resolve_player

if TYPE_CHECKING:
    from .state import LadderState

logger = logging.getLogger("oche.ladder")


class Side(str, Enum):
    """Which side of the match form won. Draws are not a result."""

    PLAYER = "player"
    OPPONENT = "opponent"


@dataclass
class MatchRecord:
    """One entry of the recent-match log, using display names at record time."""

    player: str
    opponent: str
    winner: str
    checkout: int
    played_at: float  # Unix epoch

    def to_dict(self) -> dict[str, Any]:
        return {
            "player": self.player,
            "opponent": self.opponent,
            "winner": self.winner,
            "checkout": int(self.checkout),
            "played_at": float(self.played_at),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MatchRecord | None:
        """Deserialize from dict; None when the entry is unusable."""
        player = str(d.get("player") or "").strip()
        opponent = str(d.get("opponent") or "").strip()
        if not player or not opponent:
            return None
        winner = str(d.get("winner") or "").strip()
        if winner not in (player, opponent):
            return None
        try:
            played_at = float(d.get("played_at", 0.0))
        except (TypeError, ValueError, OverflowError):
            played_at = 0.0
        if not 0.0 <= played_at <= MAX_TIMESTAMP:
            played_at = 0.0
        return cls(
            player=player,
            opponent=opponent,
            winner=winner,
            checkout=as_int(d.get("checkout"), 0, minimum=0),
            played_at=played_at,
        )


@dataclass(frozen=True)
class MatchOutcome:
    winner: str
    loser: str
    checkout: int
    winner_rating: int
    loser_rating: int
    winner_delta: int
    loser_delta: int

    def summary(self) -> str:
        return f"{self.winner} beat {self.loser} with a {self.checkout} checkout."

    def to_dict(self) -> dict[str, Any]:
        return {
            "winner": self.winner,
            "loser": self.loser,
            "checkout": self.checkout,
            "winner_rating": self.winner_rating,
            "loser_rating": self.loser_rating,
            "winner_delta": self.winner_delta,
            "loser_delta": self.loser_delta,
        }


def parse_side(value: Any) -> Side:
    if isinstance(value, Side):
        return value
    try:
        return Side(str(value))
    except ValueError:
        raise InvalidWinnerError() from None


def parse_checkout(value: Any) -> int:
    """Parse the winning checkout: a whole number from 0 to MAX_CHECKOUT."""
    if isinstance(value, bool) or value is None:
        raise InvalidCheckoutError()
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidCheckoutError() from None
    if not math.isfinite(number) or not number.is_integer() or not 0 <= number <= MAX_CHECKOUT:
        raise InvalidCheckoutError()
    return int(number)


def record_match(
    state: LadderState,
    raw_player_name: Any,
    raw_opponent_name: Any,
    winner_side: Any,
    winner_checkout: Any,
    *,
    cfg: EloConfig = EloConfig(),
    now: float | None = None,
) -> MatchOutcome:
    """Validate and apply one match result to the ladder.

    All validation happens before the state is touched, so a rejected
    submission leaves players and history unchanged. Both new ratings are
    computed from the pre-match ratings before either record is updated.

    Raises:
        EmptyNameError, DuplicatePlayerError, InvalidWinnerError,
        InvalidCheckoutError
    """
    player_name = normalize_name(raw_player_name)
    opponent_name = normalize_name(raw_opponent_name)
    if player_name.identity_key == opponent_name.identity_key:
        raise DuplicatePlayerError()
    side = parse_side(winner_side)
    checkout = parse_checkout(winner_checkout)

    player = resolve_player(state.players, player_name, cfg=cfg)
    opponent = resolve_player(state.players, opponent_name, cfg=cfg)

    # Phase 1: compute from frozen pre-match ratings.
    expected_player = expected_score(player.rating, opponent.rating)
    expected_opponent = expected_score(opponent.rating, player.rating)
    actual_player = 1.0 if side is Side.PLAYER else 0.0
    actual_opponent = 1.0 - actual_player
    new_player = update_rating(player.rating, actual_player, expected_player, cfg=cfg)
    new_opponent = update_rating(opponent.rating, actual_opponent, expected_opponent, cfg=cfg)

    # Phase 2: commit.
    player_delta = new_player - player.rating
    opponent_delta = new_opponent - opponent.rating
    player.rating = new_player
    opponent.rating = new_opponent
    player.games_played += 1
    opponent.games_played += 1

    winner, loser = (player, opponent) if side is Side.PLAYER else (opponent, player)
    winner.highest_checkout = max(winner.highest_checkout, checkout)

    record = MatchRecord(
        player=player.display_name,
        opponent=opponent.display_name,
        winner=winner.display_name,
        checkout=checkout,
        played_at=time.time() if now is None else float(now),
    )
    state.matches.insert(0, record)
    del state.matches[MATCH_HISTORY_LIMIT:]

    winner_delta, loser_delta = (
        (player_delta, opponent_delta) if side is Side.PLAYER else (opponent_delta, player_delta)
    )
    logger.info(
        f"Recorded {winner.display_name} ({winner.rating}, {winner_delta:+d}) over "
        f"{loser.display_name} ({loser.rating}, {loser_delta:+d}), checkout {checkout}"
    )
    return MatchOutcome(
        winner=winner.display_name,
        loser=loser.display_name,
        checkout=checkout,
        winner_rating=winner.rating,
        loser_rating=loser.rating,
        winner_delta=winner_delta,
        loser_delta=loser_delta,
    )
