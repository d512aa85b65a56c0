from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from catchsim.config import FullConfig
from catchsim.constants import NUM_ACTIONS, STAY
from catchsim.decoding.constrained import masked_softmax
from catchsim.features.vocab import PADDLE_DELTAS
from catchsim.game import CatchGame, make_game
from catchsim.rules.fsm import CatchState

logger = logging.getLogger(__name__)

Policy = Callable[[CatchState, np.random.Generator], int]


@dataclass(frozen=True, slots=True)
class EpisodeRecord:
    episode: int
    ball_col: int
    actions: tuple[int, ...]
    final_paddle_col: int
    ret: float

    @property
    def length(self) -> int:
        # chance event + player turns
        return 1 + len(self.actions)

    @property
    def caught(self) -> bool:
        return self.ret > 0


def sample_chance_outcome(state: CatchState, rng: np.random.Generator) -> int:
    outcomes = state.chance_outcomes()
    cols = np.array([c for c, _ in outcomes])
    probs = np.array([p for _, p in outcomes])
    return int(rng.choice(cols, p=probs))


def uniform_policy(state: CatchState, rng: np.random.Generator) -> int:
    return int(rng.choice(state.legal_actions()))


def tracking_policy(state: CatchState, rng: np.random.Generator) -> int:
    """Step the paddle toward the ball column; stay once underneath it."""
    return STAY + int(np.sign(state.ball_col - state.paddle_col))


def tracking_logits(state: CatchState) -> np.ndarray:
    """Negative distance between the ball column and where each action leaves the paddle."""
    last = state.board.columns - 1
    landing = np.clip(state.paddle_col + np.array(PADDLE_DELTAS), 0, last)
    return -np.abs(landing - state.ball_col).astype(np.float64)


def softmax_policy(temperature: float = 1.0) -> Policy:
    """Boltzmann draw over `tracking_logits`; low temperatures approach `tracking_policy`."""

    def policy(state: CatchState, rng: np.random.Generator) -> int:
        probs = masked_softmax(tracking_logits(state), state.legal_actions_mask(), temperature)
        return int(rng.choice(NUM_ACTIONS, p=probs))

    return policy


def make_policy(name: str, temperature: float = 1.0) -> Policy:
    if name == "softmax":
        return softmax_policy(temperature)
    return POLICIES[name]


POLICIES: dict[str, Policy] = {"random": uniform_policy, "tracking": tracking_policy}


def play_episode(game: CatchGame, policy: Policy, rng: np.random.Generator,
                 episode: int = 0) -> EpisodeRecord:
    s = game.new_initial_state()
    s.apply_action(sample_chance_outcome(s, rng))
    actions = []
    while not s.is_terminal():
        a = policy(s, rng)
        s.apply_action(a)
        actions.append(a)
    rec = EpisodeRecord(episode=episode, ball_col=s.ball_col, actions=tuple(actions),
                        final_paddle_col=s.paddle_col, ret=s.returns()[0])
    logger.debug("episode %d: ball_col=%d paddle=%d return=%.0f",
                 episode, rec.ball_col, rec.final_paddle_col, rec.ret)
    return rec


def run_rollouts(game: CatchGame, n_episodes: int, policy: Policy,
                 rng: np.random.Generator) -> list[EpisodeRecord]:
    return [play_episode(game, policy, rng, episode=i) for i in range(n_episodes)]


def run_from_config(cfg: FullConfig) -> list[EpisodeRecord]:
    game = make_game(rows=cfg.game.rows, columns=cfg.game.columns)
    rng = np.random.default_rng(cfg.seed)
    policy = make_policy(cfg.rollout.policy, cfg.rollout.temperature)
    records = run_rollouts(game, cfg.rollout.n_episodes, policy, rng)
    logger.info("ran %d %s episodes on %r", len(records), cfg.rollout.policy, game)
    return records
