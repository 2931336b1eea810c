"""Fair dice exception hierarchy.

Kept dependency-free: it is imported by the core modules, storage and tests.
"""


class FairDiceError(Exception):
    """Base exception for all fair dice errors."""


class InvalidBagSizeError(FairDiceError, ValueError):
    """Raised when a bag size is not one of the allowed scales."""


class EmptyBagError(FairDiceError):
    """Raised when drawing from an empty bag.

    Rolls refill an empty bag before drawing, so reaching this means that
    guard was bypassed.
    """
