import dataclasses

import pytest

from errors import EmptyBagError, FairDiceError, InvalidBagSizeError
from models import DiceRoll, GameState


def test_dice_roll_valid() -> None:
    dice = DiceRoll(sum=7, die1=1, die2=6)
    assert dice.die1 + dice.die2 == dice.sum


@pytest.mark.parametrize("args", [(7, 3, 3), (1, 1, 0), (13, 6, 7), (2, 0, 2)])
def test_dice_roll_rejects_invalid(args) -> None:
    with pytest.raises(ValueError):
        DiceRoll(*args)


def test_dice_roll_is_immutable() -> None:
    dice = DiceRoll(4, 2, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        dice.sum = 5


def test_clone_is_independent() -> None:
    state = GameState(bag=[7, 8], bag_size=36, history=[DiceRoll(6, 3, 3)], roll_count=1, previous_bag=[6, 7, 8])
    copy = state.clone()
    copy.bag.append(2)
    copy.previous_bag.append(2)
    copy.history.append(DiceRoll(2, 1, 1))
    assert state.bag == [7, 8]
    assert state.previous_bag == [6, 7, 8]
    assert len(state.history) == 1


def test_state_helpers() -> None:
    state = GameState(bag=[], bag_size=36)
    assert state.is_bag_empty
    assert not state.can_undo
    assert state.last_roll is None

    rolled = GameState(bag=[7], bag_size=36, history=[DiceRoll(8, 4, 4)], roll_count=1, previous_bag=[7, 8])
    assert rolled.can_undo
    assert rolled.last_roll == DiceRoll(8, 4, 4)


def test_errors_share_a_base() -> None:
    assert issubclass(InvalidBagSizeError, FairDiceError)
    assert issubclass(InvalidBagSizeError, ValueError)
    assert issubclass(EmptyBagError, FairDiceError)
