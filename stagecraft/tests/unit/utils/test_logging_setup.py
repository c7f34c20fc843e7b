import logging

import pytest

from stagecraft.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_env_level_takes_precedence():
    env = {"STAGECRAFT_LOG_LEVEL": "warning"}

    assert logging_utils.configure_root(logging.INFO, environ=env) == logging.WARNING
    assert logging_utils.apply_preferences(debug_enabled=True, environ=env) == logging.WARNING


def test_debug_flag_enables_debug():
    assert logging_utils.configure_root("INFO", environ={"STAGECRAFT_DEBUG": "on"}) == logging.DEBUG


def test_preferences_apply_without_env():
    assert logging_utils.apply_preferences(debug_enabled=True, environ={}) == logging.DEBUG
    assert logging_utils.apply_preferences(debug_enabled=False, environ={}) == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_numeric_and_unknown_levels():
    assert logging_utils.configure_root(environ={"STAGECRAFT_LOG_LEVEL": "15"}) == 15
    assert logging_utils.configure_root(environ={"STAGECRAFT_LOG_LEVEL": "chatty"}) == logging.INFO


def test_default_level_by_name_when_env_is_silent():
    assert logging_utils.configure_root("error", environ={}) == logging.ERROR


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("STAGECRAFT_LOG_LEVEL", "error")

    assert logging_utils.configure_root() == logging.ERROR
