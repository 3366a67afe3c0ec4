from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .players import PlayerRecord
    from .state import LadderState


@dataclass(frozen=True)
class RankedPlayer:
    rank: int  # 1-based
    player: PlayerRecord
    movement: int  # > 0 moved up, < 0 moved down, 0 unchanged or new

    @property
    def arrow(self) -> str:
        if self.movement > 0:
            return "▲"
        if self.movement < 0:
            return "▼"
        return ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "rank": self.rank,
            "movement": self.movement,
            **self.player.as_dict(),
        }


def compute_ranking(state: LadderState, *, update_snapshot: bool = True) -> list[RankedPlayer]:
    """Order players by rating and report movement since the last ranking.

    Ties on rating are broken by identity key so the order never depends on
    insertion order. Movement compares against ``state.previous_ranks``;
    players absent from it get 0. Unless ``update_snapshot`` is False, the
    snapshot is then replaced with the ranks computed here, ready for the
    next call. Entries hold copies of the player records.
    """
    ordered = sorted(state.players.values(), key=lambda p: (-p.rating, p.identity_key))

    ranking: list[RankedPlayer] = []
    for index, player in enumerate(ordered):
        rank = index + 1
        previous = state.previous_ranks.get(player.identity_key)
        movement = 0 if previous is None else previous - rank
        ranking.append(RankedPlayer(rank=rank, player=replace(player), movement=movement))

    if update_snapshot:
        state.previous_ranks = {r.player.identity_key: r.rank for r in ranking}
    return ranking
