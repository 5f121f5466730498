"""Settings loading and CLI override merge."""

import pytest

from Gobang_Game.utils import settings as settings_mod
from Gobang_Game.utils.cli import parse_args


def test_bundled_settings_match_defaults():
    loaded = settings_mod.load_settings("config/settings.yaml")
    assert loaded == settings_mod.DEFAULT_SETTINGS


def test_missing_file_falls_back_to_defaults(tmp_path):
    loaded = settings_mod.load_settings(tmp_path / "nope.yaml")
    assert loaded == settings_mod.DEFAULT_SETTINGS


def test_yaml_overrides_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("language: zh\ncell_size: 40\n", encoding="utf-8")
    loaded = settings_mod.load_settings(path)
    assert loaded["language"] == "zh"
    assert loaded["cell_size"] == 40
    assert loaded["margin"] == 30


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")
    assert settings_mod.load_settings(path) == settings_mod.DEFAULT_SETTINGS


def test_board_size_is_not_a_setting(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("board_size: 19\n", encoding="utf-8")
    with pytest.raises(ValueError, match="board_size"):
        settings_mod.load_settings(path)


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        settings_mod.load_settings(path)


def test_cli_overrides_settings():
    args = parse_args(["--console", "--language", "zh", "--margin", "12"])
    merged = settings_mod.apply_cli_overrides(settings_mod.DEFAULT_SETTINGS, args)
    assert args.console
    assert merged["language"] == "zh"
    assert merged["margin"] == 12
    assert merged["cell_size"] == settings_mod.DEFAULT_SETTINGS["cell_size"]
    assert settings_mod.DEFAULT_SETTINGS["language"] == "en"
