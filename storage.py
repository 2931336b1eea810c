"""
Persisted state: JSON layout, strict validation, load and save.

A stored record is either fully valid and becomes a GameState, or it is
discarded; nothing partially validated reaches the game logic.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from config import BAG_SIZES, DEFAULT_BAG_SIZE, SUMS
from models import DiceRoll, GameState
from game_logic import create_initial_state

logger = logging.getLogger("fair_dice.storage")


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Serialize to the persisted layout (camelCase keys)."""
    return {
        "bag": list(state.bag),
        "history": [{"sum": r.sum, "die1": r.die1, "die2": r.die2} for r in state.history],
        "bagSize": state.bag_size,
        "rollCount": state.roll_count,
        "previousBag": None if state.previous_bag is None else list(state.previous_bag),
    }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _valid_sums(values: Any) -> Optional[List[int]]:
    if not isinstance(values, list):
        return None
    if not all(_is_int(v) and v in SUMS for v in values):
        return None
    return list(values)


def _valid_history(records: Any) -> Optional[List[DiceRoll]]:
    if not isinstance(records, list):
        return None
    history = []
    for rec in records:
        if not isinstance(rec, dict):
            return None
        fields = (rec.get("sum"), rec.get("die1"), rec.get("die2"))
        if not all(_is_int(v) for v in fields):
            return None
        try:
            history.append(DiceRoll(*fields))
        except ValueError:
            return None
    return history


def state_from_dict(data: Any) -> Optional[GameState]:
    """
    Validate a persisted record and build a GameState from it.
    Returns None if any field is missing or malformed.
    """
    if not isinstance(data, dict):
        return None

    bag_size = data.get("bagSize")
    if not _is_int(bag_size) or bag_size not in BAG_SIZES:
        return None

    bag = _valid_sums(data.get("bag"))
    if bag is None or len(bag) > bag_size:
        return None

    history = _valid_history(data.get("history"))
    if history is None:
        return None

    roll_count = data.get("rollCount")
    if not _is_int(roll_count) or roll_count != len(history):
        return None

    raw_previous = data.get("previousBag")
    if raw_previous is None:
        previous_bag = None
    else:
        previous_bag = _valid_sums(raw_previous)
        if previous_bag is None or len(previous_bag) > bag_size:
            return None

    return GameState(
        bag=bag,
        bag_size=bag_size,
        history=history,
        roll_count=roll_count,
        previous_bag=previous_bag,
    )


def load_state(path: str) -> Optional[GameState]:
    """Read a stored state; None if absent, unreadable or invalid."""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("discarding unreadable state file %s: %s", path, exc)
        return None

    state = state_from_dict(data)
    if state is None:
        logger.warning("discarding malformed state file %s", path)
    return state


def save_state(state: GameState, path: str) -> bool:
    """Write the state as JSON. Returns False if the file could not be written."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state_to_dict(state), f)
    except OSError as exc:
        logger.warning("could not save state to %s: %s", path, exc)
        return False
    return True


def load_or_create(path: str, bag_size: int = DEFAULT_BAG_SIZE) -> GameState:
    """Stored state if there is a valid one, otherwise a fresh initial state."""
    state = load_state(path)
    if state is None:
        state = create_initial_state(bag_size)
    return state
