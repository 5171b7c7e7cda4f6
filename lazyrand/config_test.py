"""Tests for environment configuration."""

import pytest

from .config import SEED_ENV_VAR, Config


def test_unset_means_no_seed():
    assert Config.from_env({}) == Config(seed=None)
    assert Config.from_env({SEED_ENV_VAR: "   "}).seed is None


@pytest.mark.parametrize(
    "raw,expected",
    [("123456", 123456), ("0x1F", 31), (" 42 ", 42), ("-5", -5)],
)
def test_parses_integers(raw, expected):
    assert Config.from_env({SEED_ENV_VAR: raw}).seed == expected


def test_rejects_garbage():
    with pytest.raises(ValueError, match=SEED_ENV_VAR):
        Config.from_env({SEED_ENV_VAR: "twelve"})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv(SEED_ENV_VAR, "99")
    assert Config.from_env().seed == 99
    monkeypatch.delenv(SEED_ENV_VAR)
    assert Config.from_env().seed is None


def test_config_is_frozen():
    config = Config(seed=1)
    with pytest.raises(AttributeError):
        config.seed = 2  # type: ignore[misc]
