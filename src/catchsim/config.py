from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, Field, ValidationError
import yaml

from catchsim.constants import DEFAULT_COLUMNS, DEFAULT_ROWS
from catchsim.errors import InvalidConfigurationError

class GameCfg(BaseModel):
    rows: int = Field(default=DEFAULT_ROWS, gt=0)
    columns: int = Field(default=DEFAULT_COLUMNS, gt=0)

class RolloutCfg(BaseModel):
    n_episodes: int = Field(default=100, gt=0)
    policy: Literal["random", "tracking", "softmax"] = "random"
    temperature: float = Field(default=1.0, gt=0.0)  # softmax policy only

class FullConfig(BaseModel):
    seed: int = 42
    game: GameCfg = GameCfg()
    rollout: RolloutCfg = RolloutCfg()

def game_config(**params) -> GameCfg:
    """Validate named game parameters (rows, columns)."""
    try:
        return GameCfg.model_validate(params)
    except ValidationError as e:
        raise InvalidConfigurationError(str(e)) from e

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    try:
        return FullConfig.model_validate(raw)
    except ValidationError as e:
        raise InvalidConfigurationError(str(e)) from e
