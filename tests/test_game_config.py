import pytest

from catchsim.config import FullConfig, game_config, load_config
from catchsim.errors import InvalidConfigurationError
from catchsim.game import CatchGame, make_game


def test_default_game_shapes():
    g = make_game()
    assert (g.num_rows, g.num_columns) == (10, 5)
    assert g.num_distinct_actions() == 3
    assert g.max_chance_outcomes() == 5
    assert g.num_players() == 1
    assert (g.min_utility(), g.max_utility()) == (-1.0, 1.0)
    assert g.utility_sum() is None
    assert g.max_game_length() == 10
    assert g.observation_tensor_shape() == [10, 5]
    assert g.observation_tensor_size() == 50
    assert g.information_state_tensor_shape() == [35]


def test_custom_game_and_clone():
    g = make_game(rows=7, columns=3)
    twin = g.clone()
    assert twin == g and twin is not g
    assert twin.parameters() == {"rows": 7, "columns": 3}
    assert g.max_chance_outcomes() == 3
    assert g.information_state_tensor_shape() == [3 + 3 * 7]


def test_states_share_board_not_episode():
    g = make_game()
    a, b = g.new_initial_state(), g.new_initial_state()
    a.apply_action(0)
    assert b.is_chance_node()
    assert a.board is b.board is g.board


@pytest.mark.parametrize("params", [{"rows": 0}, {"columns": 0}, {"rows": -3}, {"columns": -1}])
def test_non_positive_dimensions_rejected(params):
    with pytest.raises(InvalidConfigurationError):
        make_game(**params)
    with pytest.raises(ValueError):
        game_config(**params)


def test_load_config_yaml(tmp_path):
    p = tmp_path / "catch.yaml"
    p.write_text("seed: 3\ngame:\n  rows: 6\n  columns: 2\nrollout:\n  policy: tracking\n")
    cfg = load_config(str(p))
    assert cfg.seed == 3
    assert (cfg.game.rows, cfg.game.columns) == (6, 2)
    assert cfg.rollout.policy == "tracking"
    assert CatchGame(cfg.game).num_columns == 2


def test_load_empty_config_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(str(p)) == FullConfig()


def test_load_config_rejects_bad_board(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("game:\n  rows: 0\n")
    with pytest.raises(InvalidConfigurationError):
        load_config(str(p))
