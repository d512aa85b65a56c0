from __future__ import annotations
import logging

from catchsim.config import GameCfg, game_config
from catchsim.constants import (CAUGHT_REWARD, DEFAULT_COLUMNS, DEFAULT_ROWS, MISSED_REWARD,
                                NUM_ACTIONS, NUM_PLAYERS)
from catchsim.grid import BoardConfig
from catchsim.rules.fsm import CatchState

logger = logging.getLogger(__name__)

class CatchGame:
    """
    Static description of a catch board: shapes, bounds and the factory for
    fresh episodes. Immutable and shared by every state it creates.
    """
    short_name = "catch"

    def __init__(self, cfg: GameCfg | None = None):
        cfg = cfg if cfg is not None else GameCfg()
        self.board = BoardConfig(rows=cfg.rows, columns=cfg.columns)

    @property
    def num_rows(self) -> int:
        return self.board.rows

    @property
    def num_columns(self) -> int:
        return self.board.columns

    def parameters(self) -> dict[str, int]:
        return {"rows": self.num_rows, "columns": self.num_columns}

    def new_initial_state(self) -> CatchState:
        return CatchState(self.board)

    def clone(self) -> "CatchGame":
        return CatchGame(GameCfg(**self.parameters()))

    def num_distinct_actions(self) -> int:
        return NUM_ACTIONS

    def max_chance_outcomes(self) -> int:
        return self.num_columns

    def num_players(self) -> int:
        return NUM_PLAYERS

    def min_utility(self) -> float:
        return MISSED_REWARD

    def max_utility(self) -> float:
        return CAUGHT_REWARD

    def utility_sum(self) -> float | None:
        return None  # single player, not constant-sum

    def max_game_length(self) -> int:
        return self.num_rows

    def observation_tensor_shape(self) -> list[int]:
        return [self.num_rows, self.num_columns]

    def observation_tensor_size(self) -> int:
        return self.board.num_cells

    def information_state_tensor_shape(self) -> list[int]:
        return [self.num_columns + NUM_ACTIONS * self.num_rows]

    def information_state_tensor_size(self) -> int:
        return self.information_state_tensor_shape()[0]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CatchGame) and self.board == other.board

    def __hash__(self) -> int:
        return hash(self.board)

    def __repr__(self) -> str:
        return f"CatchGame(rows={self.num_rows}, columns={self.num_columns})"

def make_game(rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> CatchGame:
    """Build a game from named parameters; raises InvalidConfigurationError if not positive."""
    cfg = game_config(rows=rows, columns=columns)
    logger.debug("building catch game rows=%d columns=%d", cfg.rows, cfg.columns)
    return CatchGame(cfg)
