"""
Core game logic: state initialization and the roll/undo/reset/resize transitions.

Transitions never mutate the state they are given; each returns a new
GameState with every field updated together.
"""

import logging
import random
from typing import Tuple

from config import BAG_SIZES, DEFAULT_BAG_SIZE
from errors import InvalidBagSizeError
from models import DiceRoll, GameState
from bag import build_bag, decompose_sum, draw_one

logger = logging.getLogger("fair_dice.game_logic")


def validate_bag_size(value) -> int:
    """
    Boundary check for bag sizes coming from callers or UI widgets.
    Accepts ints and numeric strings; returns the size as an int.
    """
    if isinstance(value, bool):
        raise InvalidBagSizeError(f"invalid bag size {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise InvalidBagSizeError(f"invalid bag size {value!r}")
        value = int(value)
    if not isinstance(value, int) or value not in BAG_SIZES:
        raise InvalidBagSizeError(f"bag size must be one of {BAG_SIZES}, got {value!r}")
    return value


def create_initial_state(bag_size: int = DEFAULT_BAG_SIZE, rng: random.Random | None = None) -> GameState:
    """Fresh shuffled bag, empty history, nothing to undo."""
    size = validate_bag_size(bag_size)
    return GameState(
        bag=build_bag(size, rng),
        bag_size=size,
        history=[],
        roll_count=0,
        previous_bag=None,
    )


def needs_rollover(state: GameState) -> bool:
    """True when the next roll will rebuild the bag before drawing."""
    return state.is_bag_empty


def roll(state: GameState, rng: random.Random | None = None) -> Tuple[GameState, DiceRoll]:
    """
    Draw one sum from the bag and turn it into a pair of die faces.
      - An empty bag is rebuilt at the current size first (rollover);
        history is kept across rollovers.
      - previous_bag holds the bag as it was before this roll, so undo
        also reverses a rollover.
    Returns:
      (new state, the roll)
    """
    bag = state.bag
    if not bag:
        bag = build_bag(state.bag_size, rng)
        logger.info("bag empty, rolled over to a fresh bag of %d", state.bag_size)

    new_bag, total = draw_one(bag, rng)
    dice = decompose_sum(total, rng)

    new_state = GameState(
        bag=new_bag,
        bag_size=state.bag_size,
        history=state.history + [dice],
        roll_count=state.roll_count + 1,
        previous_bag=state.bag[:],
    )
    logger.debug("roll %d: %d + %d = %d", new_state.roll_count, dice.die1, dice.die2, dice.sum)
    if not new_bag:
        logger.info("bag exhausted after roll %d, next roll starts a new bag", new_state.roll_count)
    return new_state, dice


def undo(state: GameState) -> GameState:
    """Reverse the most recent roll; a no-op when there is nothing to undo."""
    if not state.can_undo:
        return state

    logger.info("undoing roll %d (%d)", state.roll_count, state.history[-1].sum)
    return GameState(
        bag=state.previous_bag[:],
        bag_size=state.bag_size,
        history=state.history[:-1],
        roll_count=state.roll_count - 1,
        previous_bag=None,
    )


def reset(state: GameState, bag_size: int | None = None, rng: random.Random | None = None) -> GameState:
    """Abandon the current cycle and start over at ``bag_size`` (or the current size)."""
    size = state.bag_size if bag_size is None else validate_bag_size(bag_size)
    logger.info("reset after %d rolls, bag size %d", state.roll_count, size)
    return create_initial_state(size, rng)


def resize(state: GameState, bag_size: int, rng: random.Random | None = None) -> GameState:
    """Switch to a new bag size; always restarts the cycle."""
    size = validate_bag_size(bag_size)
    logger.info("resized bag %d -> %d, discarding %d rolls", state.bag_size, size, state.roll_count)
    return create_initial_state(size, rng)
