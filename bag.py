"""
Bag construction, shuffling, drawing and probability accounting.

Every function here is pure. Randomness comes from the optional ``rng``
argument (anything with ``randrange``, e.g. ``random.Random(seed)``); when it
is omitted the module-level ``random`` functions are used.
"""

import logging
import random
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from config import BASE_CYCLE, BASE_DISTRIBUTION, DIE_FACES, SUMS
from errors import EmptyBagError, InvalidBagSizeError
from models import DiceRoll

logger = logging.getLogger("fair_dice.bag")


def build_bag(size: int, rng: random.Random | None = None) -> List[int]:
    """
    Build a shuffled bag whose contents are the exact 2d6 distribution
    replicated ``size / 36`` times.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0 or size % BASE_CYCLE:
        raise InvalidBagSizeError(f"bag size must be a positive multiple of {BASE_CYCLE}, got {size!r}")

    multiplier = size // BASE_CYCLE
    bag: List[int] = []
    for total, count in BASE_DISTRIBUTION.items():
        bag.extend([total] * (count * multiplier))
    return shuffle(bag, rng)


def shuffle(seq: Sequence[int], rng: random.Random | None = None) -> List[int]:
    """Fisher-Yates shuffle into a new list; ``seq`` is left untouched."""
    rng = rng or random
    a = list(seq)
    for i in range(len(a) - 1, 0, -1):
        j = rng.randrange(i + 1)
        a[i], a[j] = a[j], a[i]
    return a


def draw_one(bag: Sequence[int], rng: random.Random | None = None) -> Tuple[List[int], int]:
    """
    Remove one uniformly chosen element.
    Returns:
      (new bag one element shorter, drawn value)
    """
    if not bag:
        raise EmptyBagError("cannot draw from an empty bag; refill it first")
    rng = rng or random
    idx = rng.randrange(len(bag))
    new_bag = list(bag)
    value = new_bag.pop(idx)
    logger.debug("drew %d at index %d, %d left", value, idx, len(new_bag))
    return new_bag, value


def valid_pairs(total: int) -> List[Tuple[int, int]]:
    """All (die1, die2) face pairs that add up to ``total``, by ascending die1."""
    pairs = []
    for d1 in DIE_FACES:
        d2 = total - d1
        if d2 in DIE_FACES:
            pairs.append((d1, d2))
    return pairs


def decompose_sum(total: int, rng: random.Random | None = None) -> DiceRoll:
    """Pick one of the valid face pairs for ``total``, each equally likely."""
    if total not in SUMS:
        raise ValueError(f"sum must be in [2, 12], got {total!r}")
    rng = rng or random
    pairs = valid_pairs(total)
    die1, die2 = pairs[rng.randrange(len(pairs))]
    return DiceRoll(sum=total, die1=die1, die2=die2)


def count_remaining(bag: Sequence[int]) -> Dict[int, int]:
    """Occurrences of each sum in the bag, with zeros for absent sums."""
    counts = Counter(bag)
    return {s: counts[s] for s in SUMS}


def compute_probabilities(bag: Sequence[int]) -> Dict[int, float]:
    """Percent chance of each sum on the next draw from ``bag``."""
    total = len(bag)
    counts = count_remaining(bag)
    return {s: (counts[s] / total) * 100 if total > 0 else 0.0 for s in SUMS}


def expected_probabilities() -> Dict[int, float]:
    """Theoretical 2d6 percentages, independent of any bag."""
    return {s: (BASE_DISTRIBUTION[s] / BASE_CYCLE) * 100 for s in SUMS}
