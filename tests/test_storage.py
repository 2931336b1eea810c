import json
import logging
import random
from pathlib import Path

import pytest

from models import DiceRoll
from game_logic import create_initial_state, roll
from storage import load_or_create, load_state, save_state, state_from_dict, state_to_dict


def _played_state():
    rng = random.Random(1)
    state = create_initial_state(36, rng)
    for _ in range(3):
        state, _ = roll(state, rng)
    return state


def _valid_record() -> dict:
    return {
        "bag": [7, 8, 6],
        "history": [{"sum": 7, "die1": 3, "die2": 4}],
        "bagSize": 36,
        "rollCount": 1,
        "previousBag": [7, 8, 6, 7],
    }


def test_state_to_dict_layout() -> None:
    state = _played_state()
    data = state_to_dict(state)
    assert set(data) == {"bag", "history", "bagSize", "rollCount", "previousBag"}
    assert data["bagSize"] == 36
    assert data["rollCount"] == 3
    assert data["history"][0] == {
        "sum": state.history[0].sum,
        "die1": state.history[0].die1,
        "die2": state.history[0].die2,
    }


def test_dict_round_trip_through_json() -> None:
    state = _played_state()
    assert state_from_dict(json.loads(json.dumps(state_to_dict(state)))) == state


def test_state_from_valid_record() -> None:
    state = state_from_dict(_valid_record())
    assert state is not None
    assert state.bag == [7, 8, 6]
    assert state.history == [DiceRoll(7, 3, 4)]
    assert state.previous_bag == [7, 8, 6, 7]


def test_null_previous_bag_is_accepted() -> None:
    record = _valid_record()
    record["previousBag"] = None
    assert state_from_dict(record).previous_bag is None


@pytest.mark.parametrize(
    "field, value",
    [
        ("bag", "7,8,6"),
        ("bag", [7, 13]),
        ("bag", [7, True]),
        ("bag", [7.0]),
        ("bag", [7] * 37),
        ("history", {"sum": 7}),
        ("history", [{"sum": 7, "die1": 3, "die2": 3}]),
        ("history", [{"sum": 7, "die1": 3}]),
        ("history", [[3, 4]]),
        ("bagSize", "36"),
        ("bagSize", 50),
        ("bagSize", True),
        ("rollCount", 2),
        ("rollCount", "1"),
        ("previousBag", "none"),
        ("previousBag", [1]),
    ],
)
def test_malformed_records_are_rejected(field: str, value) -> None:
    record = _valid_record()
    record[field] = value
    assert state_from_dict(record) is None


@pytest.mark.parametrize("field", ["bag", "history", "bagSize", "rollCount"])
def test_missing_fields_are_rejected(field: str) -> None:
    record = _valid_record()
    del record[field]
    assert state_from_dict(record) is None


@pytest.mark.parametrize("data", [None, [], "state", 3])
def test_non_dict_is_rejected(data) -> None:
    assert state_from_dict(data) is None


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    state = _played_state()
    assert save_state(state, str(path)) is True
    assert load_state(str(path)) == state


def test_load_missing_file(tmp_path: Path) -> None:
    assert load_state(str(tmp_path / "nope.json")) is None


def test_load_corrupt_file_is_discarded(tmp_path: Path, caplog) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="fair_dice.storage"):
        assert load_state(str(path)) is None
    assert "discarding" in caplog.text


def test_load_malformed_shape_is_discarded(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"bag": {}, "history": [], "bagSize": 72}), encoding="utf-8")
    assert load_state(str(path)) is None


def test_save_failure_returns_false(tmp_path: Path) -> None:
    assert save_state(_played_state(), str(tmp_path)) is False


def test_load_or_create_falls_back_to_fresh_state(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("[]", encoding="utf-8")
    state = load_or_create(str(path), 144)
    assert state.bag_size == 144
    assert len(state.bag) == 144
    assert state.history == []


def test_load_or_create_uses_stored_state(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    state = _played_state()
    save_state(state, str(path))
    assert load_or_create(str(path)) == state
