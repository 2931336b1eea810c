"""
Data models and state representations.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from config import DIE_FACES, SUMS


@dataclass(frozen=True)
class DiceRoll:
    """One completed roll: the drawn sum and the die faces shown for it."""
    sum: int
    die1: int
    die2: int

    def __post_init__(self) -> None:
        if self.sum not in SUMS:
            raise ValueError(f"sum must be in [2, 12], got {self.sum!r}")
        if self.die1 not in DIE_FACES or self.die2 not in DIE_FACES:
            raise ValueError(f"dice must be in [1, 6], got ({self.die1!r}, {self.die2!r})")
        if self.die1 + self.die2 != self.sum:
            raise ValueError(f"{self.die1} + {self.die2} != {self.sum}")


@dataclass
class GameState:
    """Session state for one bag-rolling session."""
    bag: List[int]                          # remaining sums, next draw is uniform over these
    bag_size: int                           # one of BAG_SIZES
    history: List[DiceRoll] = field(default_factory=list)
    roll_count: int = 0                     # always len(history)
    previous_bag: Optional[List[int]] = None  # bag right before the last un-undone roll

    def clone(self) -> "GameState":
        return GameState(
            bag=self.bag[:],
            bag_size=self.bag_size,
            history=self.history[:],
            roll_count=self.roll_count,
            previous_bag=None if self.previous_bag is None else self.previous_bag[:],
        )

    @property
    def is_bag_empty(self) -> bool:
        return not self.bag

    @property
    def can_undo(self) -> bool:
        return self.previous_bag is not None and bool(self.history)

    @property
    def last_roll(self) -> Optional[DiceRoll]:
        return self.history[-1] if self.history else None
