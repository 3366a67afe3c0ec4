"""JSON file persistence for the ladder state."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .elo import EloConfig
from .errors import MalformedStateError
from .state import LadderState

logger = logging.getLogger("oche.ladder")


class StateStore:
    """Single-blob storage for a LadderState.

    The whole state is written on every save; there are no partial updates.
    """

    def __init__(self, path: Path, *, cfg: EloConfig = EloConfig()) -> None:
        self.path = Path(path)
        self.cfg = cfg

    def load(self) -> LadderState:
        """Load the stored state, or an empty one if absent or unreadable. Never raises."""
        if not self.path.exists():
            return LadderState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return LadderState.from_dict(data, cfg=self.cfg)
        except (OSError, ValueError, RecursionError, MalformedStateError) as e:
            logger.warning(f"Ignoring unreadable ladder state at {self.path}: {e}")
            return LadderState()

    def save(self, state: LadderState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(state.as_dict(), indent=2), encoding="utf-8")
        os.replace(tmp, self.path)
