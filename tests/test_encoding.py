import numpy as np

from catchsim.constants import LEFT, RIGHT, STAY
from catchsim.game import make_game


def test_observation_example_ten_by_five():
    s = make_game(rows=10, columns=5).new_initial_state()
    s.apply_action(2)
    s.apply_action(RIGHT)
    s.apply_action(RIGHT)
    s.apply_action(STAY)
    assert (s.ball_row, s.ball_col, s.paddle_col) == (3, 2, 4)
    obs = s.observation_tensor()
    assert obs.shape == (50,)
    assert obs.sum() == 2
    assert list(np.flatnonzero(obs)) == [17, 49]


def test_observation_caught_ball_shares_cell():
    s = make_game(rows=2, columns=3).new_initial_state()
    s.apply_action(1)
    s.apply_action(STAY)
    obs = s.observation_tensor()
    assert obs.max() == 1.0
    assert list(np.flatnonzero(obs)) == [4]


def test_observation_uninitialized_is_zero():
    obs = make_game().new_initial_state().observation_tensor()
    assert obs.shape == (50,) and not obs.any()


def test_information_state_length_in_every_phase():
    game = make_game(rows=4, columns=3)
    s = game.new_initial_state()
    expected = game.information_state_tensor_size()
    assert expected == 3 + 3 * 4
    info = s.information_state_tensor()
    assert info.shape == (expected,) and not info.any()
    s.apply_action(0)
    while not s.is_terminal():
        assert s.information_state_tensor().shape == (expected,)
        s.apply_action(LEFT)
    assert s.information_state_tensor().shape == (expected,)


def test_information_state_encodes_actions_by_turn():
    s = make_game(rows=10, columns=5).new_initial_state()
    s.apply_action(2)
    for a in (RIGHT, RIGHT, STAY):
        s.apply_action(a)
    info = s.information_state_tensor()
    assert list(np.flatnonzero(info)) == [2, 5 + 0 * 3 + 2, 5 + 1 * 3 + 2, 5 + 2 * 3 + 1]
    assert not info[5 + 3 * 3:].any()


def test_encodings_do_not_alias():
    s = make_game(rows=3, columns=3).new_initial_state()
    s.apply_action(1)
    obs = s.observation_tensor()
    obs[:] = 7
    info = s.information_state_tensor()
    info[:] = 7
    assert s.observation_tensor().sum() == 2
    assert s.information_state_tensor().sum() == 1


def test_single_row_encodings_share_the_paddle_row():
    s = make_game(rows=1, columns=3).new_initial_state()
    s.apply_action(2)
    assert s.is_terminal()
    obs = s.observation_tensor()
    assert list(np.flatnonzero(obs)) == [1, 2]
    info = s.information_state_tensor()
    assert info.shape == (3 + 3 * 1,)
    assert list(np.flatnonzero(info)) == [2]


def test_single_row_catch_encodes_one_cell():
    s = make_game(rows=1, columns=3).new_initial_state()
    s.apply_action(1)
    assert list(np.flatnonzero(s.observation_tensor())) == [1]
    assert list(np.flatnonzero(s.information_state_tensor())) == [1]
