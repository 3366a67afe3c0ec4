"""Darts ladder core.

- elo: expected score and rating update (EloConfig)
- players: name normalization and the player registry (PlayerRecord)
- matches: validated, atomic match recording (record_match, MatchRecord)
- ranking: leaderboard order and rank movement (compute_ranking)
- state / store: the aggregate state and its JSON file persistence
- service: serialized mutate-then-save operations and the reset gate
"""

from oche.ladder.elo import EloConfig, expected_score, update_rating
from oche.ladder.matches import MatchOutcome, MatchRecord, Side, record_match
from oche.ladder.players import PlayerName, PlayerRecord, normalize_name, resolve_player
from oche.ladder.ranking import RankedPlayer, compute_ranking
from oche.ladder.service import LadderService
from oche.ladder.state import LadderState
from oche.ladder.store import StateStore

__all__ = [
    "EloConfig",
    "LadderService",
    "LadderState",
    "MatchOutcome",
    "MatchRecord",
    "PlayerName",
    "PlayerRecord",
    "RankedPlayer",
    "Side",
    "StateStore",
    "compute_ranking",
    "expected_score",
    "normalize_name",
    "record_match",
    "resolve_player",
    "update_rating",
]
