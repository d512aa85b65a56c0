from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from catchsim.features.vocab import BALL_GLYPH, EMPTY_GLYPH, PADDLE_GLYPH
from catchsim.state import EpisodeState

class CellState(Enum):
    EMPTY = 0
    BALL = 1
    PADDLE = 2

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

_GLYPHS = {
    CellState.EMPTY: EMPTY_GLYPH,
    CellState.BALL: BALL_GLYPH,
    CellState.PADDLE: PADDLE_GLYPH,
}

@dataclass(frozen=True, slots=True)
class BoardConfig:
    rows: int
    columns: int

    @property
    def num_cells(self) -> int:
        return self.rows * self.columns

    @property
    def paddle_row(self) -> int:
        return self.rows - 1

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

def cell_at(board: BoardConfig, s: EpisodeState, row: int, col: int) -> CellState:
    if not board.in_bounds(row, col):
        raise IndexError(f"cell ({row}, {col}) outside {board.rows}x{board.columns}")
    if row == board.paddle_row and col == s.paddle_col:
        return CellState.PADDLE
    if row == s.ball_row and col == s.ball_col:
        return CellState.BALL
    return CellState.EMPTY

def render_board(board: BoardConfig, s: EpisodeState) -> str:
    lines = []
    for r in range(board.rows):
        lines.append("".join(cell_at(board, s, r, c).glyph for c in range(board.columns)))
    return "".join(ln + "\n" for ln in lines)
