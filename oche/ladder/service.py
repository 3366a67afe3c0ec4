from __future__ import annotations

import hmac
import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from .elo import EloConfig
from .errors import ResetAuthenticationError
from .matches import MatchOutcome, MatchRecord, record_match
from .players import PlayerRecord, normalize_name
from .ranking import RankedPlayer, compute_ranking

if TYPE_CHECKING:
    from .store import StateStore

logger = logging.getLogger("oche.ladder")


class LadderService:
    """Owns one ladder state and serializes every operation on it.

    Each mutation is followed immediately by a save. If the save fails the
    in-memory state is rolled back so it never runs ahead of storage.
    """

    def __init__(
        self,
        store: StateStore,
        *,
        reset_passphrase: str,
        cfg: EloConfig = EloConfig(),
    ) -> None:
        self.store = store
        self.cfg = cfg
        self._reset_passphrase = reset_passphrase
        self._lock = threading.Lock()
        self.state = store.load()

    def _commit(self, snapshot: dict[str, Any]) -> None:
        try:
            self.store.save(self.state)
        except OSError:
            logger.exception("Failed to save ladder state, rolling back")
            restored = type(self.state).from_dict(snapshot, cfg=self.cfg)
            self.state.players = restored.players
            self.state.matches = restored.matches
            self.state.previous_ranks = restored.previous_ranks
            raise

    def record_match(
        self,
        player_name: Any,
        opponent_name: Any,
        winner_side: Any,
        checkout: Any,
        *,
        now: float | None = None,
    ) -> tuple[MatchOutcome, list[RankedPlayer]]:
        """Record a match and preview the standings it produces.

        The preview does not move the ranking snapshot forward; the next
        render does, so it is the one that shows the movement.
        """
        with self._lock:
            snapshot = self.state.as_dict()
            outcome = record_match(
                self.state,
                player_name,
                opponent_name,
                winner_side,
                checkout,
                cfg=self.cfg,
                now=now,
            )
            self._commit(snapshot)
            return outcome, compute_ranking(self.state, update_snapshot=False)

    def standings(self) -> list[RankedPlayer]:
        with self._lock:
            snapshot = self.state.as_dict()
            ranking = compute_ranking(self.state)
            self._commit(snapshot)
            return ranking

    def recent_matches(self) -> list[MatchRecord]:
        with self._lock:
            return [replace(m) for m in self.state.matches]

    def get_player(self, name: str) -> PlayerRecord | None:
        key = normalize_name(name).identity_key
        with self._lock:
            record = self.state.players.get(key)
            return None if record is None else replace(record)

    def reset(self, passphrase: Any) -> None:
        """Clear players, matches and ranks if the passphrase matches.

        Raises:
            ResetAuthenticationError: wrong passphrase; nothing is changed.
        """
        supplied = str(passphrase if passphrase is not None else "").encode("utf-8")
        if not hmac.compare_digest(supplied, self._reset_passphrase.encode("utf-8")):
            logger.warning("Refused ladder reset: incorrect passphrase")
            raise ResetAuthenticationError()
        with self._lock:
            snapshot = self.state.as_dict()
            self.state.clear()
            self._commit(snapshot)
        logger.info("Ladder reset: all players, matches and ranks cleared")
