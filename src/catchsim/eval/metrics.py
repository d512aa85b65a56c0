from __future__ import annotations
from typing import Iterable
import numpy as np
import pandas as pd

from catchsim.decoding.simulate import EpisodeRecord
from catchsim.features.vocab import ACTION_NAMES

def records_frame(records: Iterable[EpisodeRecord]) -> pd.DataFrame:
    """One row per episode."""
    rows = [
        {
            "episode": r.episode,
            "ball_col": r.ball_col,
            "final_paddle_col": r.final_paddle_col,
            "n_actions": len(r.actions),
            "length": r.length,
            "ret": r.ret,
            "caught": r.caught,
            "actions": list(r.actions),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=["episode", "ball_col", "final_paddle_col", "n_actions",
                                       "length", "ret", "caught", "actions"])

def catch_rate(df: pd.DataFrame) -> float:
    if len(df) == 0:
        return float("nan")
    return float(df["caught"].mean())

def action_shares(df: pd.DataFrame) -> pd.Series:
    """Fraction of player turns spent on each action, indexed LEFT/STAY/RIGHT."""
    flat = df["actions"].explode().dropna()
    names = flat.astype(int).map(lambda a: ACTION_NAMES[a])
    return names.value_counts(normalize=True).reindex(list(ACTION_NAMES)).fillna(0.0)

def summarize(df: pd.DataFrame) -> dict:
    if len(df) == 0:
        return dict(n=0, catch_rate=np.nan, mean_return=np.nan, mean_length=np.nan)
    return dict(
        n=len(df),
        catch_rate=catch_rate(df),
        mean_return=float(df["ret"].mean()),
        mean_length=float(df["length"].mean()),
    )
