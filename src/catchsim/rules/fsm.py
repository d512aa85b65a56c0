from __future__ import annotations
import logging
from enum import Enum

import numpy as np

from catchsim.constants import (CAUGHT_REWARD, CHANCE_PLAYER_ID, MISSED_REWARD, NUM_ACTIONS,
                                PLAYER_ID, TERMINAL_PLAYER_ID)
from catchsim.errors import InvalidActionError, InvalidPhaseError
from catchsim.features.encoding import information_state_tensor, observation_tensor
from catchsim.features.vocab import ACTION_NAMES, PADDLE_DELTAS
from catchsim.grid import BoardConfig, CellState, cell_at, render_board
from catchsim.state import EpisodeState

logger = logging.getLogger(__name__)

class Phase(Enum):
    UNINITIALIZED = 1   # chance node: ball column not drawn yet
    IN_PROGRESS = 2
    TERMINAL = 3

class CatchState:
    """
    Episode state machine: one chance event places the ball, then each player
    action moves the paddle and drops the ball one row until it reaches the
    paddle row.

    All three actions are legal at every turn; moves into a wall are clamped.
    """

    def __init__(self, board: BoardConfig, episode: EpisodeState | None = None):
        self.board = board
        self._s = episode if episode is not None else EpisodeState()
        self._undo: list[tuple[bool, int, int, int]] = []

    @property
    def ball_row(self) -> int:
        return self._s.ball_row

    @property
    def ball_col(self) -> int:
        return self._s.ball_col

    @property
    def paddle_col(self) -> int:
        return self._s.paddle_col

    @property
    def initialized(self) -> bool:
        return self._s.initialized

    @property
    def history(self) -> list[int]:
        return list(self._s.history)

    @property
    def phase(self) -> Phase:
        if not self._s.initialized:
            return Phase.UNINITIALIZED
        if self._s.ball_row >= self.board.rows - 1:
            return Phase.TERMINAL
        return Phase.IN_PROGRESS

    def is_chance_node(self) -> bool:
        return self.phase is Phase.UNINITIALIZED

    def is_terminal(self) -> bool:
        return self.phase is Phase.TERMINAL

    def current_player(self) -> int:
        phase = self.phase
        if phase is Phase.TERMINAL:
            return TERMINAL_PLAYER_ID
        if phase is Phase.UNINITIALIZED:
            return CHANCE_PLAYER_ID
        return PLAYER_ID

    def cell_at(self, row: int, col: int) -> CellState:
        return cell_at(self.board, self._s, row, col)

    def legal_actions(self) -> list[int]:
        if self.phase is not Phase.IN_PROGRESS:
            return []
        return list(range(NUM_ACTIONS))

    def legal_actions_mask(self) -> np.ndarray:
        mask = np.zeros(NUM_ACTIONS, dtype=bool)
        mask[self.legal_actions()] = True
        return mask

    def chance_outcomes(self) -> list[tuple[int, float]]:
        if self.phase is not Phase.UNINITIALIZED:
            raise InvalidPhaseError(f"chance outcomes requested in phase {self.phase.name}")
        p = 1.0 / self.board.columns
        return [(col, p) for col in range(self.board.columns)]

    def apply_action(self, action: int) -> None:
        phase = self.phase
        if phase is Phase.TERMINAL:
            raise InvalidPhaseError("episode is terminal; no further actions accepted")
        if isinstance(action, bool) or not isinstance(action, (int, np.integer)):
            raise InvalidActionError(f"action must be an integer, got {action!r}")
        action = int(action)
        if phase is Phase.UNINITIALIZED:
            if not 0 <= action < self.board.columns:
                raise InvalidActionError(
                    f"chance outcome {action} outside [0, {self.board.columns})")
        elif not 0 <= action < NUM_ACTIONS:
            raise InvalidActionError(f"action {action} outside [0, {NUM_ACTIONS})")

        player = self.current_player()
        s = self._s
        self._undo.append(s.snapshot())
        if phase is Phase.UNINITIALIZED:
            s.initialized = True
            s.ball_row = 0
            s.ball_col = action
            s.paddle_col = self.board.columns // 2
        else:
            s.paddle_col = min(max(s.paddle_col + PADDLE_DELTAS[action], 0), self.board.columns - 1)
            s.ball_row += 1
        s.history.append(action)
        logger.debug("applied %s -> ball=(%d, %d) paddle=%d phase=%s",
                     self.action_to_string(player, action),
                     s.ball_row, s.ball_col, s.paddle_col, self.phase.name)

    def undo_action(self, action: int) -> None:
        """Revert the last applied action, which must equal `action`."""
        if not self._undo:
            raise InvalidPhaseError("nothing to undo at the root state")
        if self._s.history[-1] != action:
            raise InvalidActionError(
                f"cannot undo {action}; last applied action was {self._s.history[-1]}")
        self._s.restore(self._undo.pop())
        self._s.history.pop()
        logger.debug("undid %d -> phase=%s", action, self.phase.name)

    def child(self, action: int) -> "CatchState":
        nxt = self.clone()
        nxt.apply_action(action)
        return nxt

    def returns(self) -> list[float]:
        if not self.is_terminal():
            return [0.0]
        return [CAUGHT_REWARD if self._s.paddle_col == self._s.ball_col else MISSED_REWARD]

    def rewards(self) -> list[float]:
        return self.returns()

    def observation_tensor(self) -> np.ndarray:
        return observation_tensor(self.board, self._s)

    def information_state_tensor(self) -> np.ndarray:
        return information_state_tensor(self.board, self._s)

    def action_to_string(self, player: int, action: int) -> str:
        if player == CHANCE_PLAYER_ID:
            return f"Initialized ball to {action}"
        return ACTION_NAMES[action]

    def history_str(self) -> str:
        return ", ".join(str(a) for a in self._s.history)

    def information_state_string(self) -> str:
        return self.history_str()

    def observation_string(self) -> str:
        return render_board(self.board, self._s)

    def __str__(self) -> str:
        return render_board(self.board, self._s)

    def __repr__(self) -> str:
        s = self._s
        return (f"CatchState(ball=({s.ball_row}, {s.ball_col}), paddle={s.paddle_col}, "
                f"phase={self.phase.name})")

    def clone(self) -> "CatchState":
        twin = CatchState(self.board, self._s.copy())
        twin._undo = list(self._undo)
        return twin

    def __copy__(self) -> "CatchState":
        return self.clone()

    def __deepcopy__(self, memo) -> "CatchState":
        return self.clone()
