import json

import pytest

from mambasim.config import ModelConfig, load
from mambasim.generator import GeneratorConfig

SAMPLE = {
    "mamba_num": 1,
    "mamba_shot_percentage": 0.65,
    "player_shot_percentage": 0.5,
    "mamba_mental": 1,
    "mental_coefficient": 0.1,
    "heal_rate": 0.05,
    "shot_accuracy_rate": 0.5,
    "logistic_k": 5,
    "logistic_x0": 1,
    "fallback_shot_percentage": 0.3,
}


def _write(tmp_path, payload):
    path = tmp_path / "config.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_load_reads_every_field(tmp_path):
    config = load(_write(tmp_path, SAMPLE))
    for key, value in SAMPLE.items():
        assert getattr(config, key) == value


def test_load_accepts_str_path(tmp_path):
    config = load(str(_write(tmp_path, SAMPLE)))
    assert config.mamba_num == SAMPLE["mamba_num"]


def test_missing_keys_default_to_zero(tmp_path):
    config = load(_write(tmp_path, {"mamba_num": 2}))
    assert config == ModelConfig(mamba_num=2)


def test_unknown_keys_are_ignored(tmp_path):
    payload = dict(SAMPLE, extra="ignored")
    assert load(_write(tmp_path, payload)) == load(_write(tmp_path, SAMPLE))


def test_float_fields_become_floats(tmp_path):
    config = load(_write(tmp_path, SAMPLE))
    assert isinstance(config.logistic_k, float)
    assert config.logistic_k == SAMPLE["logistic_k"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path):
    with pytest.raises(ValueError):
        load(_write(tmp_path, "{not json"))


def test_empty_file_raises(tmp_path):
    with pytest.raises(ValueError):
        load(_write(tmp_path, ""))


def test_non_object_raises(tmp_path):
    with pytest.raises(ValueError):
        load(_write(tmp_path, [1, 2, 3]))


@pytest.mark.parametrize(
    "payload",
    [{"mamba_num": 1.5}, {"mamba_num": "1"}, {"heal_rate": "fast"}, {"heal_rate": True}],
)
def test_wrong_types_raise(tmp_path, payload):
    with pytest.raises(ValueError):
        load(_write(tmp_path, payload))


def test_generator_config_copies_shared_fields(tmp_path):
    config = load(_write(tmp_path, SAMPLE))
    generated = config.generator_config()
    expected = {k: v for k, v in SAMPLE.items() if k != "fallback_shot_percentage"}
    assert generated == GeneratorConfig(**expected)