"""
Monte Carlo comparison of bag rolling against independent dice.
"""

import random
from typing import Dict, List, Sequence
from collections import Counter

from config import DIE_FACES, SUMS
from bag import expected_probabilities
from game_logic import create_initial_state, roll


def roll_with_bag(n_rolls: int, bag_size: int, rng: random.Random | None = None) -> List[int]:
    """Sums from ``n_rolls`` consecutive bag rolls starting from a fresh state."""
    state = create_initial_state(bag_size, rng)
    sums = []
    for _ in range(n_rolls):
        state, dice = roll(state, rng)
        sums.append(dice.sum)
    return sums


def roll_independent(n_rolls: int, rng: random.Random | None = None) -> List[int]:
    """Sums of two independent uniform d6, ``n_rolls`` times."""
    rng = rng or random
    return [rng.choice(DIE_FACES) + rng.choice(DIE_FACES) for _ in range(n_rolls)]


def max_deviation(sums: Sequence[int]) -> float:
    """
    Largest absolute gap, in percentage points, between the observed share
    of any sum and its theoretical probability.
    """
    if not sums:
        return 0.0
    expected = expected_probabilities()
    counts = Counter(sums)
    n = len(sums)
    return max(abs(counts[s] / n * 100 - expected[s]) for s in SUMS)


def compare_methods(
    n_rolls: int,
    n_trials: int,
    bag_size: int,
    rng: random.Random | None = None,
) -> Dict[str, float]:
    """
    Monte Carlo: average max deviation over ``n_trials`` runs of ``n_rolls``.
    Returns:
      {"bag": mean deviation with the bag, "independent": mean deviation with plain dice}
    """
    if n_trials <= 0:
        return {"bag": 0.0, "independent": 0.0}

    bag_total = 0.0
    independent_total = 0.0
    for _ in range(n_trials):
        bag_total += max_deviation(roll_with_bag(n_rolls, bag_size, rng))
        independent_total += max_deviation(roll_independent(n_rolls, rng))

    return {
        "bag": bag_total / n_trials,
        "independent": independent_total / n_trials,
    }
