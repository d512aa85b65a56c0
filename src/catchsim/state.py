from __future__ import annotations
from dataclasses import dataclass, field

@dataclass(slots=True)
class EpisodeState:
    initialized: bool = False
    ball_row: int = -1      # 0..rows-1 once initialized
    ball_col: int = -1      # fixed by the chance event
    paddle_col: int = -1    # 0..columns-1 once initialized
    history: list[int] = field(default_factory=list)  # chance outcome first

    def snapshot(self) -> tuple[bool, int, int, int]:
        return (self.initialized, self.ball_row, self.ball_col, self.paddle_col)

    def restore(self, snap: tuple[bool, int, int, int]) -> None:
        self.initialized, self.ball_row, self.ball_col, self.paddle_col = snap

    def copy(self) -> "EpisodeState":
        return EpisodeState(
            self.initialized, self.ball_row, self.ball_col, self.paddle_col, list(self.history)
        )

    @property
    def player_actions(self) -> list[int]:
        return self.history[1:]
