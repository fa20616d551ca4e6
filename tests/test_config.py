"""Tests for editor config loading."""

import pytest

from engine.config.loader import ConfigLoader, EditorConfig


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigLoader(tmp_path).load()

    assert config == EditorConfig()
    assert config.layout.columns == 3
    assert config.layout.spacing_x == 200
    assert config.spawn.width == 300
    assert config.node_id_prefix == "node"


def test_partial_yaml_merges_with_defaults(tmp_path):
    (tmp_path / "editor.yaml").write_text(
        "layout:\n"
        "  columns: 4\n"
        "spawn:\n"
        "  min_x: 0\n"
        "seed: 3\n"
    )

    config = ConfigLoader(tmp_path).load()

    assert config.layout.columns == 4
    assert config.layout.spacing_y == 100
    assert config.spawn.min_x == 0
    assert config.spawn.min_y == 50
    assert config.seed == 3


def test_empty_yaml_gives_defaults(tmp_path):
    (tmp_path / "editor.yaml").write_text("")

    assert ConfigLoader(tmp_path).load() == EditorConfig()


def test_invalid_values_raise(tmp_path):
    (tmp_path / "editor.yaml").write_text("layout:\n  columns: 0\n")

    with pytest.raises(ValueError, match="Invalid config"):
        ConfigLoader(tmp_path).load()


def test_non_mapping_raises(tmp_path):
    (tmp_path / "editor.yaml").write_text("- just\n- a list\n")

    with pytest.raises(ValueError, match="expected a mapping"):
        ConfigLoader(tmp_path).load()


def test_broken_yaml_raises(tmp_path):
    (tmp_path / "editor.yaml").write_text("layout: [unclosed\n")

    with pytest.raises(ValueError, match="Failed to load"):
        ConfigLoader(tmp_path).load()


def test_from_env(tmp_path, monkeypatch):
    (tmp_path / "editor.yaml").write_text("node_id_prefix: step\nlog_level: INFO\n")
    monkeypatch.setenv("EDITOR_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = EditorConfig.from_env()

    assert config.node_id_prefix == "step"
    assert config.log_level == "DEBUG"


def test_log_level_is_normalized(tmp_path):
    (tmp_path / "editor.yaml").write_text("log_level: warning\n")

    assert ConfigLoader(tmp_path).load().log_level == "WARNING"


def test_unknown_log_level_in_file_raises(tmp_path):
    (tmp_path / "editor.yaml").write_text("log_level: verbose\n")

    with pytest.raises(ValueError, match="Invalid config"):
        ConfigLoader(tmp_path).load()


def test_unknown_log_level_in_env_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("EDITOR_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "warn")

    with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
        EditorConfig.from_env()
