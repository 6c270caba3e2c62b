import pytest

from kilo.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_stop == 4
    assert config.quit_times == 3
    assert config.message_timeout == 5.0
    assert config.highlight_digits


def test_from_env_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "KILO_TAB_STOP": "8",
            "KILO_QUIT_TIMES": "1",
            "KILO_MESSAGE_TIMEOUT": "2.5",
            "KILO_HIGHLIGHT_DIGITS": "off",
        }
    )

    assert config.tab_stop == 8
    assert config.quit_times == 1
    assert config.message_timeout == 2.5
    assert not config.highlight_digits


def test_from_env_ignores_malformed_values() -> None:
    config = EditorConfig.from_env(
        {"KILO_TAB_STOP": "wide", "KILO_QUIT_TIMES": "-4", "KILO_READ_TIMEOUT": "x"}
    )

    assert config.tab_stop == 4
    assert config.quit_times == 0
    assert config.read_timeout == 0.1


def test_from_env_rejects_zero_tab_stop() -> None:
    assert EditorConfig.from_env({"KILO_TAB_STOP": "0"}).tab_stop == 4


def test_with_overrides_skips_none() -> None:
    config = EditorConfig().with_overrides(tab_stop=None, quit_times=5)

    assert config.tab_stop == 4
    assert config.quit_times == 5


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(tab_stop=0)
    with pytest.raises(ValueError):
        EditorConfig(quit_times=-1)
