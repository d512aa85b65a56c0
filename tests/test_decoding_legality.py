import numpy as np
import pytest

from catchsim.decoding.constrained import apply_masks, masked_softmax
from catchsim.game import make_game


def test_masks_never_empty_in_progress():
    s = make_game().new_initial_state()
    assert not s.legal_actions_mask().any()
    s.apply_action(0)
    while not s.is_terminal():
        assert s.legal_actions_mask().all()
        s.apply_action(0)
    assert not s.legal_actions_mask().any()


def test_apply_masks_sets_illegal_to_neg_inf():
    logits = np.array([0.5, 1.0, -2.0])
    out = apply_masks(logits, np.array([True, False, True]))
    assert out[1] == -np.inf
    assert out[0] == 0.5 and out[2] == -2.0
    assert logits[1] == 1.0


def test_masked_softmax_zero_on_illegal():
    p = masked_softmax(np.array([3.0, 1.0, 1.0]), np.array([False, True, True]))
    assert p[0] == 0.0
    assert p[1] == pytest.approx(0.5)
    assert p.sum() == pytest.approx(1.0)


def test_masked_softmax_needs_a_legal_action():
    with pytest.raises(ValueError):
        masked_softmax(np.zeros(3), np.zeros(3, dtype=bool))
