from __future__ import annotations
import numpy as np

from catchsim.constants import NUM_ACTIONS
from catchsim.grid import BoardConfig
from catchsim.state import EpisodeState

def observation_tensor(board: BoardConfig, s: EpisodeState) -> np.ndarray:
    """
    One-hot grid flattened row-major to [rows * columns].
    Ball and paddle cells are 1; a caught ball shares the paddle cell.
    """
    obs = np.zeros((board.rows, board.columns), dtype=np.float32)
    if s.initialized:
        obs[s.ball_row, s.ball_col] = 1.0
        obs[board.paddle_row, s.paddle_col] = 1.0
    return obs.reshape(-1)

def information_state_tensor(board: BoardConfig, s: EpisodeState) -> np.ndarray:
    """
    [columns] one-hot ball column, then [rows] blocks of [NUM_ACTIONS] one-hot actions.
    Blocks for turns not yet played stay zero.
    """
    info = np.zeros(board.columns + NUM_ACTIONS * board.rows, dtype=np.float32)
    if not s.initialized:
        return info
    info[s.ball_col] = 1.0
    for turn, action in enumerate(s.player_actions):
        info[board.columns + turn * NUM_ACTIONS + action] = 1.0
    return info
