from __future__ import annotations

# Players
NUM_PLAYERS = 1
PLAYER_ID = 0
CHANCE_PLAYER_ID = -1
TERMINAL_PLAYER_ID = -4

# Actions (left, stay, right)
NUM_ACTIONS = 3
LEFT = 0
STAY = 1
RIGHT = 2

# Board defaults
DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 5

# Utilities
CAUGHT_REWARD = 1.0
MISSED_REWARD = -1.0
