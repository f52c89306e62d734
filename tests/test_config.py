"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from staticmap import Blake2bHash, Builder, BuildConfig, load_build_config, load_config


def test_load_config(tmp_path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("expected_entries: 100\nhasher: blake2b\nseed: 9\n")

    assert load_config(path) == {"expected_entries": 100, "hasher": "blake2b", "seed": 9}


def test_load_config_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_empty(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_load_config_not_mapping(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_bad_yaml(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("seed: [1, 2\n")
    with pytest.raises(yaml.YAMLError):
        load_config(path)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"expected_entries": -1},
        {"expected_entries": 1.5},
        {"hasher": "md5"},
        {"seed": -1},
        {"seed": 2**64},
        {"empty_key": 0},
    ],
)
def test_build_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        BuildConfig(**kwargs)


def test_from_dict_ignores_unknown_keys() -> None:
    cfg = BuildConfig.from_dict({"seed": 3, "comment": "ignored"})
    assert cfg.seed == 3
    assert cfg.hasher == "splitmix"


def test_overrides_win(tmp_path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("expected_entries: 10\nseed: 1\nhasher: blake2b\n")

    cfg = load_build_config(path, seed=5, hasher=None)

    assert cfg.seed == 5
    assert cfg.hasher == "blake2b"
    assert cfg.expected_entries == 10


def test_builder_from_config() -> None:
    cfg = BuildConfig(expected_entries=100, hasher="blake2b", seed=11, empty_key="0")
    builder = Builder.from_config(cfg)

    assert builder.capacity == 128
    assert isinstance(builder.hasher, Blake2bHash)
    assert builder.hasher.seed == 11
    assert builder.entries[0].key == "0"


def test_default_config_file() -> None:
    path = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    cfg = BuildConfig.from_dict(load_config(path))
    assert cfg == BuildConfig()
