from models import DiceRoll, GameState
from ui import format_share_summary


def test_share_summary_lists_last_ten_rolls() -> None:
    history = [DiceRoll(2, 1, 1)] * 5 + [DiceRoll(7, 3, 4)] * 10
    state = GameState(bag=[8] * 21, bag_size=36, history=history, roll_count=15)
    summary = format_share_summary(state)
    lines = summary.splitlines()
    assert "Bag size: 36" in lines
    assert "Rolls this cycle: 15" in lines
    assert "Remaining in bag: 21 / 36" in lines
    assert lines.count("  3 + 4 = 7") == 10
    assert "  1 + 1 = 2" not in lines


def test_share_summary_without_rolls() -> None:
    summary = format_share_summary(GameState(bag=[7] * 36, bag_size=36))
    assert "Last rolls:" not in summary
