"""
Roll analytics: frequencies, ties, observed percentages and bag depletion.
"""

from typing import Dict, List, Sequence, Tuple
from collections import Counter

from config import BASE_CYCLE, HISTORY_DISPLAY_LIMIT, SUMS
from models import DiceRoll, GameState
from bag import count_remaining


def frequency_by_sum(history: Sequence[DiceRoll]) -> Dict[int, int]:
    """How many times each sum has been rolled, zeros included."""
    counts = Counter(r.sum for r in history)
    return {s: counts[s] for s in SUMS}


def most_frequent_sums(history: Sequence[DiceRoll]) -> Tuple[List[int], int]:
    """
    All sums tied for the highest frequency, ascending, plus that frequency.
    An empty history has no most frequent sum: ([], 0).
    """
    if not history:
        return [], 0

    freq = frequency_by_sum(history)
    max_count = max(freq.values())
    tied = [s for s in SUMS if freq[s] == max_count]
    return tied, max_count


def observed_percentages(history: Sequence[DiceRoll]) -> Dict[int, float]:
    """Share of rolls per sum, in percent."""
    n = len(history)
    freq = frequency_by_sum(history)
    return {s: (freq[s] / n) * 100 if n > 0 else 0.0 for s in SUMS}


def theoretical_max_count(total: int, bag_size: int) -> float:
    """Copies of ``total`` in a freshly built bag of ``bag_size``."""
    ways = total - 1 if total <= 7 else 13 - total
    return ways * bag_size / BASE_CYCLE


def bag_fill_ratios(bag: Sequence[int], bag_size: int) -> Dict[int, float]:
    """Remaining copies of each sum relative to a full bag (1.0 = untouched)."""
    counts = count_remaining(bag)
    ratios = {}
    for s in SUMS:
        max_count = theoretical_max_count(s, bag_size)
        ratios[s] = counts[s] / max_count if max_count > 0 else 0.0
    return ratios


def recent_rolls(history: Sequence[DiceRoll], limit: int = HISTORY_DISPLAY_LIMIT) -> List[Tuple[int, DiceRoll]]:
    """Newest-first (roll number, roll) pairs for the last ``limit`` rolls."""
    n = len(history)
    start = max(0, n - limit)
    return [(i + 1, history[i]) for i in range(n - 1, start - 1, -1)]


def cycle_progress(state: GameState) -> int:
    """Draws taken from the current bag since it was built."""
    return state.bag_size - len(state.bag)
