import json

import pytest
from flask import Flask

from faleproxy.managers.config_manager import config_manager
from faleproxy.server import app as server_app
from faleproxy.utils.path_utils import PathUtils

MOCK_SETTINGS_CONTENT = {
    "server": {"host": "127.0.0.1", "port": 3001, "debug": True},
    "transform": {"target_word": "yale", "replacement_word": "fale"},
    "debug": {"level": "WARNING"}
}


@pytest.fixture
def run_calls(tmp_path, monkeypatch):
    """
    Laadt een nep 'settings.json' en vangt de argumenten van Flask.run op
    in plaats van een echte server te starten.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: settings_file)
    monkeypatch.setattr(server_app, 'configure_logger', lambda **kwargs: None)
    monkeypatch.delenv('PORT', raising=False)
    config_manager.reset()

    calls = []
    monkeypatch.setattr(Flask, 'run', lambda self, **kwargs: calls.append(kwargs))
    yield calls

    monkeypatch.undo()
    config_manager.reset()


def test_main_uses_settings_by_default(run_calls, monkeypatch):
    monkeypatch.setattr('sys.argv', ['faleproxy'])
    server_app.main()

    assert run_calls == [{"debug": True, "host": "127.0.0.1", "port": 3001, "use_reloader": False}]


def test_port_env_overrides_settings(run_calls, monkeypatch):
    monkeypatch.setattr('sys.argv', ['faleproxy'])
    monkeypatch.setenv('PORT', '4000')
    server_app.main()

    assert run_calls[0]["port"] == 4000
    assert config_manager.get_nested('server.port') == 4000


def test_cli_flags_override_env_and_settings(run_calls, monkeypatch):
    monkeypatch.setattr('sys.argv', ['faleproxy', '--port', '5050', '--host', '0.0.0.0', '--no-debug'])
    monkeypatch.setenv('PORT', '4000')
    server_app.main()

    assert run_calls[0]["port"] == 5050
    assert run_calls[0]["host"] == "0.0.0.0"
    assert run_calls[0]["debug"] is False


def test_debug_flag_enables_debug(run_calls):
    config_manager.set_nested('server.debug', False)
    server_app.main(['--debug'])

    assert run_calls[0]["debug"] is True
