"""
ScaffoldBuilder — writes the project descriptor and, for fresh projects,
a CMakeLists.txt and a minimal source tree.

Usage:
    builder = ScaffoldBuilder()
    result = builder.build(ScaffoldRequest("foo", "/tmp/x"))
    # result.success, result.failed_artifact, result.project_file

Fresh project layout:
    <target>/
    ├── foo.cide
    ├── CMakeLists.txt
    ├── src/foo/main.cc
    └── build/

Adopting an existing CMakeLists.txt only writes <name>.cide next to it and
makes sure the build folder exists.

Writes happen in a fixed order and stop at the first failed file. Nothing is
rolled back: a failure after the descriptor was written leaves the descriptor
on disk. Failing to create build/ (fresh) or the build folder (adopt) is only
logged.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from cide_scaffold.host import FileSystem, LocalFileSystem
from cide_scaffold.models import (
    AdoptBuildFile,
    DirectoryCreationFailed,
    FileWriteFailed,
    FreshProject,
    GeneratedArtifact,
    ScaffoldError,
    ScaffoldRequest,
    ScaffoldResult,
)

from .templates import apply_newline_style, cmake, project_file, source

logger = logging.getLogger(__name__)

BUILD_DIR_NAME = "build"


# ─────────────────────────────────────────────────────────────────────────────
# Planning helpers
# ─────────────────────────────────────────────────────────────────────────────

def project_file_path(request: ScaffoldRequest) -> Path:
    """Where <name>.cide ends up for this request."""
    name = request.project_name + project_file.PROJECT_FILE_SUFFIX
    mode = request.mode
    if isinstance(mode, AdoptBuildFile):
        return mode.source_dir / name
    return mode.project_dir / name


def suggest_build_folder(build_file: str | Path, fs: Optional[FileSystem] = None) -> Path:
    """
    Pre-fill for the build folder when adopting build_file: the first
    sub-directory next to it whose name starts with "build" (any case),
    else <dir>/build.
    """
    fs = fs or LocalFileSystem()
    source_dir = Path(build_file).parent
    for name in fs.list_subdirectories(source_dir):
        if name.lower().startswith(BUILD_DIR_NAME):
            return source_dir / name
    return source_dir / BUILD_DIR_NAME


def plan_artifacts(
    request: ScaffoldRequest,
    relative_build_dir: Optional[str] = None,
    fs: Optional[FileSystem] = None,
) -> list[GeneratedArtifact]:
    """
    Files to write for request, in write order, newline style applied.

    Paths are relative to the project folder (fresh) or to the folder of the
    existing build file (adopt). relative_build_dir is only used in adopt
    mode; it defaults to the build folder relative to that folder, computed
    by fs.relative_path.
    """
    name = request.project_name
    binary_name = name
    style = request.newline_style
    mode = request.mode

    if isinstance(mode, AdoptBuildFile):
        if relative_build_dir is None:
            fs = fs or LocalFileSystem()
            relative_build_dir = fs.relative_path(mode.source_dir, mode.build_dir)
        text = project_file.render_adopted(name, binary_name, relative_build_dir)
        return [
            GeneratedArtifact(
                Path(name + project_file.PROJECT_FILE_SUFFIX),
                apply_newline_style(text, style),
                label="project file",
            ),
        ]

    source_subfolder = name
    return [
        GeneratedArtifact(
            Path(name + project_file.PROJECT_FILE_SUFFIX),
            apply_newline_style(project_file.render_fresh(name, binary_name), style),
            label="project file",
        ),
        GeneratedArtifact(
            Path(cmake.CMAKE_LISTS_NAME),
            apply_newline_style(cmake.render(name, binary_name, source_subfolder), style),
            label=f"{cmake.CMAKE_LISTS_NAME} file",
        ),
        GeneratedArtifact(
            Path("src") / source_subfolder / source.MAIN_FILE_NAME,
            apply_newline_style(source.MAIN_CC, style),
            label="main file",
        ),
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Builder
# ─────────────────────────────────────────────────────────────────────────────

class ScaffoldBuilder:
    """
    Materialises a ScaffoldRequest on disk through a FileSystem.

    build() never raises ScaffoldError; failures come back as
    ScaffoldResult(success=False, failed_artifact=..., error=...).
    """

    def __init__(self, fs: Optional[FileSystem] = None):
        self.fs: FileSystem = fs or LocalFileSystem()

    def build(self, request: ScaffoldRequest) -> ScaffoldResult:
        result = ScaffoldResult(success=False, project_file=project_file_path(request))
        mode = request.mode
        try:
            if isinstance(mode, FreshProject):
                self._build_fresh(request, mode, result)
            else:
                self._build_adopted(request, mode, result)
        except ScaffoldError as exc:
            logger.error("%s", exc)
            result.failed_artifact = exc.path
            result.error = exc
            return result

        result.success = True
        logger.info(
            "Scaffolded project '%s' (%d file(s)): %s",
            request.project_name, len(result.written), result.project_file,
        )
        return result

    # ── Modes ────────────────────────────────────────────────────────────────

    def _build_fresh(
        self, request: ScaffoldRequest, mode: FreshProject, result: ScaffoldResult
    ) -> None:
        root = mode.project_dir
        if not self.fs.create_directory_recursive(root):
            raise DirectoryCreationFailed(root)
        logger.debug("Project directory ready: %s", root)

        descriptor, cmake_lists, main_file = plan_artifacts(request)
        self._write(root, descriptor, result)
        self._write(root, cmake_lists, result)
        self._ensure_directory(root / main_file.relative_path.parent)
        self._write(root, main_file, result)
        self._ensure_directory(root / BUILD_DIR_NAME)

    def _build_adopted(
        self, request: ScaffoldRequest, mode: AdoptBuildFile, result: ScaffoldResult
    ) -> None:
        self._ensure_directory(mode.build_dir)
        relative = self.fs.relative_path(mode.source_dir, mode.build_dir)
        for artifact in plan_artifacts(request, relative_build_dir=relative):
            self._write(mode.source_dir, artifact, result)

    # ── Primitives ───────────────────────────────────────────────────────────

    def _ensure_directory(self, path: Path) -> None:
        # Non-fatal: a missing directory surfaces later as a failed file write
        if self.fs.create_directory_recursive(path):
            logger.debug("Directory ready: %s", path)
        else:
            logger.warning("Could not create directory %s; continuing", path)

    def _write(self, root: Path, artifact: GeneratedArtifact, result: ScaffoldResult) -> None:
        dest = root / artifact.relative_path
        try:
            with self.fs.open_for_truncated_write(dest) as handle:
                handle.write(artifact.encoded())
        except OSError as exc:
            logger.debug("Write to %s failed: %s", dest, exc)
            raise FileWriteFailed(artifact.label or artifact.relative_path.name, dest) from exc
        result.written.append(dest)
        logger.debug("Scaffolded: %s", artifact.relative_path)
