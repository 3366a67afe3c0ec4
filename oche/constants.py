from __future__ import annotations

# ==============================================================================
# Ratings
# ==============================================================================

# Every player enters the ladder at this Elo rating.
DEFAULT_RATING = 1000

# Maximum rating swing from a single match.
K_FACTOR = 32

# Logistic scale of the Elo curve: a 400 point gap means 10:1 expected odds.
ELO_SCALE = 400.0

# ==============================================================================
# History
# ==============================================================================

# Only the most recent matches are kept, newest first.
MATCH_HISTORY_LIMIT = 5

# ==============================================================================
# Persistence
# ==============================================================================

STATE_SCHEMA_VERSION = 1

# Unix epoch bounds for stored match times; anything outside falls back to 0.
MAX_TIMESTAMP = 253402300799.0  # 9999-12-31T23:59:59Z

# ==============================================================================
# Darts
# ==============================================================================

# Highest possible finish: treble 20, treble 20, bullseye.
MAX_CHECKOUT = 170
