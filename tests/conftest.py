import json

import pytest

from Calculator import config_manager


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point config_manager at a private config.json / ui_strings.json."""
    config_path = tmp_path / "config.json"
    strings_path = tmp_path / "ui_strings.json"
    monkeypatch.setattr(config_manager, "config_json", config_path)
    monkeypatch.setattr(config_manager, "ui_strings", strings_path)
    monkeypatch.setattr(config_manager, "PROJECT_ROOT", tmp_path)

    def write(**settings):
        config_path.write_text(json.dumps(settings), encoding="utf-8")
        return config_path

    write()
    return write
