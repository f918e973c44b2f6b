"""
Tests for the scaffolding data model: newline styles, request modes,
project name validation.
"""
from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from cide_scaffold.models import (
    AdoptBuildFile,
    FreshProject,
    InvalidProjectName,
    NewlineStyle,
    ScaffoldRequest,
    validate_project_name,
)
from cide_scaffold.scaffold.templates import apply_newline_style


# ─────────────────────────────────────────────────────────────────────────────
# NewlineStyle
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw,expected", [
    ("lf", NewlineStyle.LF),
    ("LF", NewlineStyle.LF),
    ("unix", NewlineStyle.LF),
    (" crlf ", NewlineStyle.CRLF),
    ("Windows", NewlineStyle.CRLF),
])
def test_newline_parse(raw, expected):
    assert NewlineStyle.parse(raw) is expected


def test_newline_parse_native(monkeypatch):
    monkeypatch.setattr("cide_scaffold.models.os.name", "nt")
    assert NewlineStyle.parse("native") is NewlineStyle.CRLF
    monkeypatch.setattr("cide_scaffold.models.os.name", "posix")
    assert NewlineStyle.parse("native") is NewlineStyle.LF


def test_newline_parse_rejects_unknown():
    with pytest.raises(ValueError, match="unknown newline format"):
        NewlineStyle.parse("cr")


def test_newline_terminators():
    assert NewlineStyle.LF.terminator == "\n"
    assert NewlineStyle.CRLF.terminator == "\r\n"


def test_apply_newline_style():
    assert apply_newline_style("a\nb\n", NewlineStyle.LF) == "a\nb\n"
    assert apply_newline_style("a\nb\n", NewlineStyle.CRLF) == "a\r\nb\r\n"


# ─────────────────────────────────────────────────────────────────────────────
# ScaffoldRequest
# ─────────────────────────────────────────────────────────────────────────────

def test_request_without_build_file_is_fresh():
    request = ScaffoldRequest("foo", "/tmp/x")
    assert request.mode == FreshProject(project_dir=Path("/tmp/x"))


def test_request_with_build_file_is_adopt():
    request = ScaffoldRequest("foo", "/p/build2", existing_build_file="/p/CMakeLists.txt")
    mode = request.mode
    assert isinstance(mode, AdoptBuildFile)
    assert mode.build_file == Path("/p/CMakeLists.txt")
    assert mode.build_dir == Path("/p/build2")
    assert mode.source_dir == Path("/p")


def test_request_is_immutable():
    request = ScaffoldRequest("foo", "/tmp/x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.project_name = "bar"


def test_request_accepts_newline_string():
    request = ScaffoldRequest("foo", "/tmp/x", newline_style="crlf")
    assert request.newline_style is NewlineStyle.CRLF


# ─────────────────────────────────────────────────────────────────────────────
# validate_project_name
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name", ["foo", "My App", "lib-2.0", "grün"])
def test_valid_names(name):
    assert validate_project_name(name) == name


@pytest.mark.parametrize("name", ["", "   ", "a/b", ".", "..", "nul\0byte"])
def test_invalid_names(name):
    with pytest.raises(InvalidProjectName):
        validate_project_name(name)


def test_empty_name_message():
    with pytest.raises(InvalidProjectName, match="Please enter a name"):
        validate_project_name("")


def test_empty_build_file_path_is_fresh():
    """An empty path means no build file, not the current directory."""
    request = ScaffoldRequest("foo", "/tmp/x", existing_build_file="")
    assert request.existing_build_file is None
    assert request.mode == FreshProject(project_dir=Path("/tmp/x"))
