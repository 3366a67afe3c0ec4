from pathlib import Path

import pytest

from oche.ladder import LadderService, LadderState, StateStore


@pytest.fixture
def state() -> LadderState:
    return LadderState()


@pytest.fixture
def store(tmp_path: Path) -> StateStore:
    return StateStore(tmp_path / "ladder.json")


@pytest.fixture
def ladder(store: StateStore) -> LadderService:
    return LadderService(store, reset_passphrase="bullseye")
