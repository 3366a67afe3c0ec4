from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..constants import MATCH_HISTORY_LIMIT, STATE_SCHEMA_VERSION
from .elo import EloConfig
from .errors import MalformedStateError
from .matches import MatchRecord
from .players import PlayerRecord, as_int


@dataclass
class LadderState:
    """Everything the ladder knows: players, recent matches, last ranking."""

    players: dict[str, PlayerRecord] = field(default_factory=dict)
    matches: list[MatchRecord] = field(default_factory=list)  # newest first
    previous_ranks: dict[str, int] = field(default_factory=dict)

    def clear(self) -> None:
        self.players.clear()
        self.matches.clear()
        self.previous_ranks.clear()

    def as_dict(self) -> dict[str, Any]:
        return {
            "schema_version": STATE_SCHEMA_VERSION,
            "players": {key: p.as_dict() for key, p in self.players.items()},
            "matches": [m.to_dict() for m in self.matches],
            "previous_ranks": {key: int(rank) for key, rank in self.previous_ranks.items()},
        }

    @classmethod
    def from_dict(cls, d: Any, *, cfg: EloConfig = EloConfig()) -> LadderState:
        """Build a fully-populated state from a loosely-shaped blob.

        Missing or wrongly-typed fields fall back to defaults one by one;
        only a blob that is not a JSON object at all is rejected.

        Raises:
            MalformedStateError: if ``d`` is not a mapping.
        """
        if not isinstance(d, dict):
            raise MalformedStateError(f"Expected a JSON object, got {type(d).__name__}")

        state = cls()

        players = d.get("players")
        if isinstance(players, dict):
            for raw_key, item in players.items():
                key = str(raw_key).strip().casefold()
                if not key or not isinstance(item, dict):
                    continue
                state.players[key] = PlayerRecord.from_dict(key, item, cfg=cfg)

        matches = d.get("matches")
        if isinstance(matches, list):
            for item in matches:
                if not isinstance(item, dict):
                    continue
                record = MatchRecord.from_dict(item)
                if record is not None:
                    state.matches.append(record)
            del state.matches[MATCH_HISTORY_LIMIT:]

        ranks = d.get("previous_ranks")
        if isinstance(ranks, dict):
            for raw_key, rank in ranks.items():
                key = str(raw_key).strip().casefold()
                value = as_int(rank, 0)
                if key and value >= 1:
                    state.previous_ranks[key] = value

        return state
