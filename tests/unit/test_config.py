import logging

import pytest

from reverseffmi import config


def test_env_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REVERSEFFMI_LOG_LEVEL", raising=False)
    assert config._env_log_level() == logging.INFO


def test_env_log_level_reads_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSEFFMI_LOG_LEVEL", "debug")
    assert config._env_log_level() == logging.DEBUG


def test_env_log_level_unknown_name_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSEFFMI_LOG_LEVEL", "chatty")
    assert config._env_log_level() == logging.INFO


def test_defaults_lie_in_their_domains() -> None:
    assert config.BODY_FAT_RANGE.contains(config.DEFAULT_BODY_FAT_PERCENT)
    assert config.FFMI_RANGE.contains(config.DEFAULT_NORMALIZED_FFMI)
    assert config.HEIGHT_RANGES[config.UnitSystem.METRIC].contains(config.DEFAULT_HEIGHT_CM)
