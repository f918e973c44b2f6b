"""
Tests for cide_scaffold/settings.py
===================================
YAML files live in tmp_path; HOME and environment are isolated with
monkeypatch so a developer's real settings never leak in.
"""
from __future__ import annotations

import pytest

from cide_scaffold.models import NewlineStyle
from cide_scaffold.settings import NEWLINE_ENV, SETTINGS_ENV, load_settings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv(SETTINGS_ENV, raising=False)
    monkeypatch.delenv(NEWLINE_ENV, raising=False)


def test_defaults_without_file_or_env():
    settings = load_settings()
    assert settings.newline_format is NewlineStyle.LF
    assert settings.source is None


def test_explicit_file(tmp_path):
    path = tmp_path / "scaffold.yaml"
    path.write_text("newline_format: crlf\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.newline_format is NewlineStyle.CRLF
    assert settings.source == path


def test_file_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "other.yaml"
    path.write_text("newline_format: windows\n", encoding="utf-8")
    monkeypatch.setenv(SETTINGS_ENV, str(path))
    assert load_settings().newline_format is NewlineStyle.CRLF


def test_default_location(tmp_path):
    cfg = tmp_path / "home" / ".config" / "cide"
    cfg.mkdir(parents=True)
    (cfg / "scaffold.yaml").write_text("newline_format: crlf\n", encoding="utf-8")
    assert load_settings().newline_format is NewlineStyle.CRLF


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "scaffold.yaml"
    path.write_text("newline_format: crlf\n", encoding="utf-8")
    monkeypatch.setenv(NEWLINE_ENV, "lf")
    assert load_settings(path).newline_format is NewlineStyle.LF


def test_empty_file_keeps_defaults(tmp_path):
    path = tmp_path / "scaffold.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path).newline_format is NewlineStyle.LF


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "scaffold.yaml"
    path.write_text("theme: dark\nnewline_format: crlf\n", encoding="utf-8")
    assert load_settings(path).newline_format is NewlineStyle.CRLF


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_invalid_value_in_file_names_file(tmp_path):
    path = tmp_path / "scaffold.yaml"
    path.write_text("newline_format: mac\n", encoding="utf-8")
    with pytest.raises(ValueError, match="scaffold.yaml"):
        load_settings(path)


def test_invalid_value_in_env(monkeypatch):
    monkeypatch.setenv(NEWLINE_ENV, "cr")
    with pytest.raises(ValueError, match=NEWLINE_ENV):
        load_settings()


def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / "scaffold.yaml"
    path.write_text("- lf\n- crlf\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_settings(path)


def test_malformed_yaml_rejected(tmp_path):
    path = tmp_path / "scaffold.yaml"
    path.write_text("newline_format: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="scaffold.yaml"):
        load_settings(path)
