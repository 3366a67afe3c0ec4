from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import DEFAULT_RATING, ELO_SCALE, K_FACTOR


@dataclass(frozen=True)
class EloConfig:
    k_factor: float = K_FACTOR
    rating0: int = DEFAULT_RATING


def expected_score(rating_a: float, rating_b: float) -> float:
    """Probability-weighted score player A is expected to take from player B.

    Always in (0, 1), and E(a, b) + E(b, a) == 1.
    """
    return 1.0 / (1.0 + 10.0 ** ((float(rating_b) - float(rating_a)) / ELO_SCALE))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def update_rating(
    rating: int,
    actual: float,
    expected: float,
    *,
    cfg: EloConfig = EloConfig(),
) -> int:
    """New integer rating after one game.

    Args:
        rating: Rating before the game.
        actual: 1.0 for a win, 0.0 for a loss.
        expected: Expected score from expected_score().
        cfg: K-factor source.

    Returns:
        round(rating + K * (actual - expected)), halves rounded up.
    """
    return _round_half_up(float(rating) + float(cfg.k_factor) * (float(actual) - float(expected)))
