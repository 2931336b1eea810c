"""
Game configuration and constants.
"""

import os

# Sums of two six-sided dice
SUMS = list(range(2, 13))
DIE_FACES = [1, 2, 3, 4, 5, 6]

# Exact 2d6 combinatorics over one 36-outcome cycle: count(s) = 6 - |7 - s|
BASE_DISTRIBUTION = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    7: 6,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}
BASE_CYCLE = 36

# Bag sizes (multiples of the base cycle)
BAG_SIZES = [36, 72, 144]
DEFAULT_BAG_SIZE = 72

# Stats card
HISTORY_DISPLAY_LIMIT = 20
SHARE_SUMMARY_ROLLS = 10
STATS_FOCUS_SUMS = [6, 7, 8]

# Die faces for display
DIE_GLYPHS = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}

# Colors for plotting
COLOR_MAP = {
    "Next roll": "#ff7f00",   # orange
    "Expected": "#999999",    # gray
    "Bag fill": "#377eb8",    # blue
}

# Persistence
STATE_PATH = os.environ.get("FAIR_DICE_STATE_PATH", "fair-catan-state.json")

# Logging
LOG_LEVEL = os.environ.get("FAIR_DICE_LOG_LEVEL", "INFO")

# UI Settings
MONTE_CARLO_TRIALS = 200
MONTE_CARLO_ROLLS = 72  # rolls per trial when comparing bag vs independent dice
