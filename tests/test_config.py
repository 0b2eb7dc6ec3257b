from __future__ import annotations

import pytest

from vim_textarea import TextAreaConfig
from vim_textarea.errors import ConfigError
from vim_textarea.modes import Mode


def test_defaults() -> None:
    config = TextAreaConfig()
    assert config.vim_enabled is True
    assert config.default_mode is Mode.NORMAL
    assert config.initial_mode is Mode.NORMAL
    assert config.char_limit == 0
    assert config.max_height == 0


def test_default_mode_is_parsed() -> None:
    assert TextAreaConfig(default_mode="INSERT").default_mode is Mode.INSERT


def test_vim_disabled_always_starts_in_insert() -> None:
    config = TextAreaConfig(vim_enabled=False, default_mode=Mode.NORMAL)
    assert config.initial_mode is Mode.INSERT


@pytest.mark.parametrize(
    "kwargs,field",
    [
        ({"default_mode": "visual"}, "default_mode"),
        ({"default_mode": "command"}, "default_mode"),
        ({"char_limit": -1}, "char_limit"),
        ({"max_height": "3"}, "max_height"),
    ],
)
def test_invalid_values_raise_config_error(kwargs, field) -> None:
    with pytest.raises(ConfigError) as excinfo:
        TextAreaConfig(**kwargs)
    assert excinfo.value.field == field
    assert isinstance(excinfo.value, ValueError)


def test_with_overrides_revalidates() -> None:
    config = TextAreaConfig(char_limit=5)
    assert config.with_overrides(max_height=2).char_limit == 5
    with pytest.raises(ConfigError):
        config.with_overrides(char_limit=-2)


def test_from_env_reads_prefixed_variables() -> None:
    environ = {
        "VIM_TEXTAREA_VIM": "off",
        "VIM_TEXTAREA_DEFAULT_MODE": "insert",
        "VIM_TEXTAREA_CHAR_LIMIT": "140",
        "VIM_TEXTAREA_MAX_HEIGHT": "4",
    }
    config = TextAreaConfig.from_env(environ=environ)
    assert config.vim_enabled is False
    assert config.default_mode is Mode.INSERT
    assert config.char_limit == 140
    assert config.max_height == 4


def test_from_env_overrides_win() -> None:
    environ = {"APP_CHAR_LIMIT": "10"}
    config = TextAreaConfig.from_env("APP_", environ=environ, char_limit=20)
    assert config.char_limit == 20


@pytest.mark.parametrize(
    "environ",
    [{"VIM_TEXTAREA_VIM": "maybe"}, {"VIM_TEXTAREA_CHAR_LIMIT": "lots"}],
)
def test_from_env_rejects_malformed_values(environ) -> None:
    with pytest.raises(ConfigError):
        TextAreaConfig.from_env(environ=environ)


def test_from_env_rejects_unknown_overrides() -> None:
    with pytest.raises(ConfigError):
        TextAreaConfig.from_env(environ={}, colour="red")
