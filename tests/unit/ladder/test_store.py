"""Tests for state serialization and the JSON file store."""

import json
from pathlib import Path

import pytest

from oche.ladder.errors import MalformedStateError
from oche.ladder.matches import record_match
from oche.ladder.ranking import compute_ranking
from oche.ladder.state import LadderState
from oche.ladder.store import StateStore


class TestLadderStateFromDict:
    def test_as_dict_is_json_serializable(self, state):
        record_match(state, "Alice", "Bob", "player", 40, now=1.0)
        compute_ranking(state)

        d = state.as_dict()
        json.dumps(d)
        assert d["schema_version"] == 1
        assert set(d["players"]) == {"alice", "bob"}
        assert d["previous_ranks"] == {"alice": 1, "bob": 2}

    def test_restores_recorded_state(self, state):
        record_match(state, "Alice", "Bob", "opponent", 121, now=5.0)
        compute_ranking(state)

        restored = LadderState.from_dict(json.loads(json.dumps(state.as_dict())))

        assert restored.players["bob"].rating == 1016
        assert restored.players["bob"].highest_checkout == 121
        assert restored.matches[0].winner == "Bob"
        assert restored.previous_ranks == {"bob": 1, "alice": 2}

    @pytest.mark.parametrize("blob", [None, [], "text", 3])
    def test_non_object_rejected(self, blob):
        with pytest.raises(MalformedStateError):
            LadderState.from_dict(blob)

    def test_missing_sections_default_to_empty(self):
        state = LadderState.from_dict({})
        assert state.players == {}
        assert state.matches == []
        assert state.previous_ranks == {}

    def test_wrong_section_types_default_to_empty(self):
        state = LadderState.from_dict({"players": [], "matches": {}, "previous_ranks": "x"})
        assert state.players == {}
        assert state.matches == []
        assert state.previous_ranks == {}

    def test_bad_entries_skipped(self):
        state = LadderState.from_dict(
            {
                "players": {"alice": {"display_name": "Alice", "rating": 1020}, "bob": "nope", "  ": {}},
                "matches": [
                    {"player": "Alice", "opponent": "Bob", "winner": "Alice", "checkout": 40},
                    {"player": "Alice", "winner": "Alice"},
                    {"player": "Alice", "opponent": "Bob", "winner": "Carol"},
                    "junk",
                ],
                "previous_ranks": {"alice": 1, "bob": 0, "carol": "two"},
            }
        )

        assert list(state.players) == ["alice"]
        assert state.players["alice"].rating == 1020
        assert len(state.matches) == 1
        assert state.matches[0].played_at == 0.0
        assert state.previous_ranks == {"alice": 1}

    @pytest.mark.parametrize("played_at", [1e300, -5.0, "soon", 10**400, None])
    def test_out_of_range_match_time_defaults_to_zero(self, played_at):
        state = LadderState.from_dict(
            {"matches": [{"player": "A", "opponent": "B", "winner": "A", "checkout": 40, "played_at": played_at}]}
        )
        assert state.matches[0].played_at == 0.0

    def test_rank_keys_normalized_like_player_keys(self):
        state = LadderState.from_dict(
            {
                "players": {"Alice": {"display_name": "Alice", "rating": 1000}},
                "previous_ranks": {" Alice ": 2},
            }
        )
        assert state.previous_ranks == {"alice": 2}
        assert compute_ranking(state)[0].movement == 1

    def test_huge_numbers_fall_back_to_defaults(self):
        state = LadderState.from_dict(
            {
                "players": {"alice": {"rating": 10**400, "games_played": 10**400}},
                "matches": [{"player": "A", "opponent": "B", "winner": "A", "checkout": 10**400}],
                "previous_ranks": {"alice": 10**400},
            }
        )
        assert state.players["alice"].rating == 1000
        assert state.players["alice"].games_played == 0
        assert state.matches[0].checkout == 0
        assert state.previous_ranks == {}

    def test_match_list_truncated(self):
        matches = [{"player": "A", "opponent": "B", "winner": "A", "checkout": i} for i in range(9)]
        state = LadderState.from_dict({"matches": matches})
        assert [m.checkout for m in state.matches] == [0, 1, 2, 3, 4]

    def test_clear_empties_everything(self, state):
        record_match(state, "Alice", "Bob", "player", 40)
        compute_ranking(state)
        state.clear()
        assert state.as_dict()["players"] == {}
        assert state.matches == []
        assert state.previous_ranks == {}


class TestStateStore:
    def test_missing_file_gives_empty_state(self, store):
        state = store.load()
        assert state.players == {}
        assert not store.path.exists()

    def test_save_and_load(self, store, state):
        record_match(state, "Alice", "Bob", "player", 40, now=1.0)
        compute_ranking(state)
        store.save(state)

        assert store.path.exists()
        loaded = store.load()
        assert loaded.as_dict() == state.as_dict()

    def test_save_creates_parent_dirs(self, tmp_path: Path, state):
        store = StateStore(tmp_path / "nested" / "dir" / "ladder.json")
        store.save(state)
        assert store.path.exists()
        assert not store.path.with_name("ladder.json.tmp").exists()

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"players"', ""])
    def test_malformed_content_gives_empty_state(self, store, content):
        store.path.write_text(content, encoding="utf-8")
        state = store.load()
        assert state.players == {}
        assert state.matches == []
        assert state.previous_ranks == {}

    def test_binary_garbage_gives_empty_state(self, store):
        store.path.write_bytes(b"\xff\xfe\x00garbage")
        assert store.load().players == {}

    def test_oversized_integer_gives_defaults(self, store):
        store.path.write_text('{"players": {"a": {"rating": 1' + "0" * 400 + "}}}", encoding="utf-8")
        state = store.load()
        assert state.players["a"].rating == 1000

    def test_integer_beyond_parser_limit_does_not_raise(self, store):
        store.path.write_text('{"players": {"a": {"rating": ' + "9" * 5000 + "}}}", encoding="utf-8")
        state = store.load()
        assert all(p.rating == 1000 for p in state.players.values())

    def test_deeply_nested_blob_gives_empty_state(self, store):
        store.path.write_text("[" * 100_000 + "]" * 100_000, encoding="utf-8")
        state = store.load()
        assert state.players == {}
