"""
Names and glyphs shared by the state machine, the board renderer and the
rollout metrics. Action ids index straight into these tuples.
"""

ACTION_NAMES = ("LEFT", "STAY", "RIGHT")
PADDLE_DELTAS = (-1, 0, 1)  # indexed by action

EMPTY_GLYPH = "."
BALL_GLYPH = "o"
PADDLE_GLYPH = "x"
