import pytest

from mambasim.generator import GeneratorConfig, generate


def _config(**overrides):
    values = dict(
        mamba_num=1,
        mamba_shot_percentage=0.65,
        player_shot_percentage=0.5,
        mamba_mental=1,
        mental_coefficient=0.1,
        heal_rate=0.05,
        shot_accuracy_rate=0.5,
        logistic_k=5,
        logistic_x0=1,
    )
    values.update(overrides)
    return GeneratorConfig(**values)


def test_generate_returns_five_players():
    assert len(generate(_config())) == 5


def test_mambas_come_first():
    players = generate(_config(mamba_num=2))
    assert [p.config.shot_base for p in players] == [0.65, 0.65, 0.5, 0.5, 0.5]
    assert players[0].config.mamba == 1
    assert players[1].config.mamba == 1


@pytest.mark.parametrize("mamba_num", [0, 1, 2, 3, 4])
def test_team_mamba_sums_to_fixed_total(mamba_num):
    players = generate(_config(mamba_num=mamba_num, mamba_mental=0.3))
    assert sum(p.config.mamba for p in players) == pytest.approx(2.5)


def test_all_mambas():
    players = generate(_config(mamba_num=5))
    assert len(players) == 5
    assert all(p.config.shot_base == 0.65 for p in players)


def test_shared_parameters_are_copied():
    players = generate(_config())
    for player in players:
        assert player.config.mental_coefficient == 0.1
        assert player.config.heal_rate == 0.05
        assert player.config.shot_accuracy_rate == 0.5
        assert player.config.logistic_k == 5
        assert player.config.logistic_x0 == 1


def test_players_are_independent():
    players = generate(_config())
    players[0].heal()
    assert players[0].mental == pytest.approx(0.05)
    assert players[1].mental == 0


@pytest.mark.parametrize("mamba_num", [-1, 6])
def test_invalid_mamba_num_raises(mamba_num):
    with pytest.raises(ValueError):
        generate(_config(mamba_num=mamba_num))