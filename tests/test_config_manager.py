import json

from Calculator import config_manager


def test_defaults_when_file_is_missing(settings_file, tmp_path):
    (tmp_path / "config.json").unlink()
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("decimal_places") == 10


def test_defaults_when_file_is_corrupt(settings_file, tmp_path):
    (tmp_path / "config.json").write_text("{oops", encoding="utf-8")
    assert config_manager.load_setting_value("degrees") is False


def test_file_values_override_defaults(settings_file):
    settings_file(degrees=True, decimal_places=4)
    settings = config_manager.load_setting_value("all")
    assert settings["degrees"] is True
    assert settings["decimal_places"] == 4
    assert settings["max_nesting_depth"] == 100


def test_unknown_key_is_zero(settings_file):
    assert config_manager.load_setting_value("does_not_exist") == 0


def test_save_setting_round_trip(settings_file, tmp_path):
    saved = config_manager.save_setting({"darkmode": True, "history_limit": 20})
    assert saved == {"darkmode": True, "history_limit": 20}
    assert json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))["history_limit"] == 20
    assert config_manager.load_setting_value("darkmode") is True


def test_setting_descriptions(settings_file, tmp_path):
    (tmp_path / "ui_strings.json").write_text(json.dumps({"degrees": "Use degrees"}), encoding="utf-8")
    assert config_manager.load_setting_description("degrees") == "Use degrees"
    assert config_manager.load_setting_description("fractions") == 0


def test_shipped_files_cover_every_setting():
    with open(config_manager.config_json, encoding="utf-8") as f:
        shipped = json.load(f)
    with open(config_manager.ui_strings, encoding="utf-8") as f:
        descriptions = json.load(f)
    assert set(shipped) == set(config_manager.DEFAULT_SETTINGS)
    assert set(descriptions) == set(config_manager.DEFAULT_SETTINGS)


def test_resolve_path(settings_file, tmp_path):
    assert config_manager.resolve_path("history.json") == tmp_path / "history.json"
    absolute = tmp_path / "elsewhere" / "h.json"
    assert config_manager.resolve_path(str(absolute)) == absolute
