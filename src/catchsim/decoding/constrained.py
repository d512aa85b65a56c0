import numpy as np


def apply_masks(logits: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """
    Copy of `logits` with illegal-action positions set to -inf based on a boolean mask.
    """
    if logits.shape != mask.shape:
        raise ValueError(f"logits shape {logits.shape} does not match mask shape {mask.shape}")
    out = np.asarray(logits, dtype=np.float64).copy()
    out[~mask] = -np.inf
    return out


def masked_softmax(logits: np.ndarray, mask: np.ndarray, temperature: float = 1.0) -> np.ndarray:
    """Probabilities over legal actions only; illegal actions get exactly zero."""
    if not mask.any():
        raise ValueError("no legal actions to distribute probability over")
    z = apply_masks(logits, mask) / max(temperature, 1e-6)
    z = z - z[mask].max()
    p = np.exp(z)
    return p / p.sum()
