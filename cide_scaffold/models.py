"""
Scaffolding data model
======================
Requests, mode variants, generated artifacts and results shared by the
name guesser, the builder and the CLI.

A ScaffoldRequest selects its mode purely from the presence of
``existing_build_file``:

    ScaffoldRequest("foo", "/tmp/x").mode
        -> FreshProject(project_dir=Path("/tmp/x"))
    ScaffoldRequest("foo", "/p/build2", existing_build_file="/p/CMakeLists.txt").mode
        -> AdoptBuildFile(build_file=Path("/p/CMakeLists.txt"), build_dir=Path("/p/build2"))
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union


# ─────────────────────────────────────────────────────────────────────────────
# Newline convention
# ─────────────────────────────────────────────────────────────────────────────

class NewlineStyle(str, Enum):
    LF = "lf"
    CRLF = "crlf"

    @property
    def terminator(self) -> str:
        return "\r\n" if self is NewlineStyle.CRLF else "\n"

    @classmethod
    def native(cls) -> "NewlineStyle":
        return cls.CRLF if os.name == "nt" else cls.LF

    @classmethod
    def parse(cls, value: str) -> "NewlineStyle":
        """Accepts lf/crlf, unix/windows and native (case-insensitive)."""
        key = str(value or "").strip().lower()
        if key in ("lf", "unix", "\\n"):
            return cls.LF
        if key in ("crlf", "windows", "\\r\\n"):
            return cls.CRLF
        if key == "native":
            return cls.native()
        raise ValueError(
            f"unknown newline format '{value}'. Valid values: lf, crlf, native"
        )


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────

class InvalidProjectName(ValueError):
    """Raised by validate_project_name() before a request is built."""


class ScaffoldError(Exception):
    """Base class for failures reported through ScaffoldResult."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class DirectoryCreationFailed(ScaffoldError):
    def __init__(self, path: Path):
        super().__init__(path, f"Failed to create project directory ({path}).")


class FileWriteFailed(ScaffoldError):
    """
    A file artifact could not be opened for writing or written.

    Attributes
    ----------
    artifact : str  — human-readable artifact name ("project file", "CMakeLists.txt", ...)
    path : Path     — the file that failed
    """
    def __init__(self, artifact: str, path: Path):
        self.artifact = artifact
        super().__init__(path, f"Failed to create {artifact} ({path}).")


def validate_project_name(name: str) -> str:
    """
    Upstream check run before constructing a ScaffoldRequest.

    The name ends up as a file name (``<name>.cide``) and as a directory
    component (``src/<name>``), so it must be non-empty and a single path
    component. Whether it is a valid build target name is not checked.
    """
    if not name or not name.strip():
        raise InvalidProjectName("Please enter a name for the project.")
    separators = {"/", "\0"}
    if os.sep:
        separators.add(os.sep)
    if os.altsep:
        separators.add(os.altsep)
    bad = sorted(c for c in separators if c in name)
    if bad:
        raise InvalidProjectName(
            f"Project name must be a valid filename (contains {bad[0]!r}): {name}"
        )
    if name in (".", ".."):
        raise InvalidProjectName(f"Project name must be a valid filename: {name}")
    return name


# ─────────────────────────────────────────────────────────────────────────────
# Request and mode variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FreshProject:
    """Create a new project tree rooted at project_dir."""
    project_dir: Path


@dataclass(frozen=True)
class AdoptBuildFile:
    """Write a descriptor next to an existing build file, building into build_dir."""
    build_file: Path
    build_dir: Path

    @property
    def source_dir(self) -> Path:
        return self.build_file.parent


ScaffoldMode = Union[FreshProject, AdoptBuildFile]


@dataclass(frozen=True)
class ScaffoldRequest:
    """
    Everything the builder needs for one scaffolding call.

    target_folder is the project folder in fresh mode and the build folder
    in adopt mode.
    """
    project_name: str
    target_folder: Path
    existing_build_file: Optional[Path] = None
    newline_style: NewlineStyle = NewlineStyle.LF

    def __post_init__(self) -> None:
        # Normalise str inputs; frozen dataclasses need object.__setattr__
        object.__setattr__(self, "target_folder", Path(self.target_folder))
        # An empty path means "no build file", not the current directory
        if self.existing_build_file in ("", None):
            object.__setattr__(self, "existing_build_file", None)
        else:
            object.__setattr__(self, "existing_build_file", Path(self.existing_build_file))
        if not isinstance(self.newline_style, NewlineStyle):
            object.__setattr__(self, "newline_style", NewlineStyle.parse(self.newline_style))

    @property
    def mode(self) -> ScaffoldMode:
        if self.existing_build_file is None:
            return FreshProject(project_dir=self.target_folder)
        return AdoptBuildFile(
            build_file=self.existing_build_file,
            build_dir=self.target_folder,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Outputs
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GeneratedArtifact:
    """One file to persist, relative to the mode's root folder."""
    relative_path: Path
    content: str
    label: str = ""          # name used in failure messages

    def encoded(self) -> bytes:
        return self.content.encode("utf-8")


@dataclass
class ScaffoldResult:
    success: bool
    failed_artifact: Optional[Path] = None
    error: Optional[ScaffoldError] = None
    project_file: Optional[Path] = None     # descriptor the host should open next
    written: list[Path] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.success:
            return f"Created project file {self.project_file}"
        return str(self.error) if self.error else "Scaffolding failed."
