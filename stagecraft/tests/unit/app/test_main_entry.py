from __future__ import annotations

import pytest

from stagecraft.adapters.window_host_mock import InMemoryWindowHost
from stagecraft.app.main import main
from stagecraft.app.view_manager import ViewManager


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    monkeypatch.setenv("STAGECRAFT_SETTINGS_DIR", str(tmp_path))
    monkeypatch.delenv("STAGECRAFT_VIEWS_ROOT", raising=False)
    ViewManager.reset_instance()
    yield
    ViewManager.reset_instance()


def test_headless_run_opens_hello_window():
    assert main(["--headless"]) == 0

    manager = ViewManager.get_instance()
    assert isinstance(manager.host, InMemoryWindowHost)
    assert [w.title for w in manager.open_windows] == ["Hello!"]


def test_unknown_view_name_exits_with_usage_code():
    assert main(["--headless", "--view", "nope"]) == 2


def test_missing_initial_view_exits_with_error(monkeypatch, tmp_path):
    monkeypatch.setenv("STAGECRAFT_VIEWS_ROOT", str(tmp_path / "empty"))

    assert main(["--headless"]) == 1
    assert ViewManager.get_instance().open_windows == []
