from __future__ import annotations

import pytest

from vim_operand.runtime import telemetry
from vim_operand.runtime.settings import (
    DEFAULT_OPERATORS,
    EngineSettings,
    env_flag,
    get_settings,
    load_settings,
    reset_settings,
)


def test_load_settings_defaults() -> None:
    settings = load_settings({})

    assert settings == EngineSettings()
    assert settings.exclusive_linewise is False
    assert settings.operators == DEFAULT_OPERATORS


def test_load_settings_reads_prefixed_values() -> None:
    settings = load_settings(
        {
            "VIM_OPERAND_EXCLUSIVE_LINEWISE": "Yes",
            "VIM_OPERAND_OPERATORS": "d, y ,gu,d",
        }
    )

    assert settings.exclusive_linewise is True
    assert settings.operators == ("d", "y", "gu")


def test_load_settings_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        load_settings({"VIM_OPERAND_EXCLUSIVE_LINEWISE": "maybe"})
    with pytest.raises(ValueError):
        load_settings({"VIM_OPERAND_OPERATORS": " , "})
    with pytest.raises(ValueError):
        load_settings({"VIM_OPERAND_OPERATORS": "2d"})


def test_get_settings_caches_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIM_OPERAND_EXCLUSIVE_LINEWISE", "off")
    reset_settings()
    first = get_settings()

    monkeypatch.setenv("VIM_OPERAND_EXCLUSIVE_LINEWISE", "on")
    assert get_settings() is first

    reset_settings()
    assert get_settings().exclusive_linewise is True
    reset_settings()


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_env_flag_parses_known_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VIM_OPERAND_LOG_JSON", raising=False)
    assert env_flag("LOG_JSON", True) is True

    monkeypatch.setenv("VIM_OPERAND_LOG_JSON", " On ")
    assert env_flag("LOG_JSON", False) is True

    monkeypatch.setenv("VIM_OPERAND_LOG_JSON", "off")
    assert env_flag("LOG_JSON", True) is False


def test_env_flag_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIM_OPERAND_LOG_JSON", "maybe")

    with pytest.raises(ValueError, match="VIM_OPERAND_LOG_JSON"):
        env_flag("LOG_JSON", False)


def test_configure_has_no_preset_aliases() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="performance_analysis")
