from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .elo import EloConfig
from .errors import EmptyNameError


def as_int(value: Any, default: int, *, minimum: int | None = None) -> int:
    """Coerce a loosely-typed persisted value to int, falling back to default."""
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    result = int(number)
    if minimum is not None and result < minimum:
        return minimum
    return result


@dataclass(frozen=True)
class PlayerName:
    identity_key: str
    display_name: str


def normalize_name(raw: Any) -> PlayerName:
    """Split raw form input into a lookup key and a display name.

    Surrounding whitespace is trimmed; the key is case-folded, the display
    name keeps the original casing. Raises EmptyNameError for blank input.
    """
    trimmed = str(raw if raw is not None else "").strip()
    if not trimmed:
        raise EmptyNameError()
    return PlayerName(identity_key=trimmed.casefold(), display_name=trimmed)


@dataclass
class PlayerRecord:
    identity_key: str
    display_name: str
    rating: int
    games_played: int = 0
    highest_checkout: int = 0

    def as_dict(self) -> dict[str, Any]:
        return {
            "identity_key": str(self.identity_key),
            "display_name": str(self.display_name),
            "rating": int(self.rating),
            "games_played": int(self.games_played),
            "highest_checkout": int(self.highest_checkout),
        }

    @classmethod
    def from_dict(cls, key: str, d: dict[str, Any], *, cfg: EloConfig) -> PlayerRecord:
        # The mapping key wins over a stored identity_key so lookups stay consistent.
        display_name = str(d.get("display_name") or "").strip() or key
        return cls(
            identity_key=key,
            display_name=display_name,
            rating=as_int(d.get("rating"), cfg.rating0),
            games_played=as_int(d.get("games_played"), 0, minimum=0),
            highest_checkout=as_int(d.get("highest_checkout"), 0, minimum=0),
        )


def resolve_player(
    players: dict[str, PlayerRecord],
    name: PlayerName,
    *,
    cfg: EloConfig = EloConfig(),
) -> PlayerRecord:
    """Get or create the record for a normalized name.

    Known players get their display name overwritten (last writer wins) so
    casing and spelling can be corrected without losing rating history.
    """
    existing = players.get(name.identity_key)
    if existing is not None:
        existing.display_name = name.display_name
        return existing

    record = PlayerRecord(
        identity_key=name.identity_key,
        display_name=name.display_name,
        rating=int(cfg.rating0),
    )
    players[name.identity_key] = record
    return record
