"""
CIDE Project Scaffolding
========================
Creates CIDE project descriptors (``<name>.cide``) either for a brand new
CMake project or for an existing CMakeLists.txt.

New project:
    from cide_scaffold import ScaffoldBuilder, ScaffoldRequest, NewlineStyle

    result = ScaffoldBuilder().build(
        ScaffoldRequest("foo", "/tmp/foo", newline_style=NewlineStyle.LF)
    )

Existing CMakeLists.txt:
    from cide_scaffold import guess_project_name_from_file, suggest_build_folder

    name = guess_project_name_from_file("/p/CMakeLists.txt")
    build_dir = suggest_build_folder("/p/CMakeLists.txt")
    result = ScaffoldBuilder().build(
        ScaffoldRequest(name, build_dir, existing_build_file="/p/CMakeLists.txt")
    )
"""

from .models import (
    AdoptBuildFile, DirectoryCreationFailed, FileWriteFailed, FreshProject,
    GeneratedArtifact, InvalidProjectName, NewlineStyle, ScaffoldError,
    ScaffoldRequest, ScaffoldResult, validate_project_name,
)
from .host import FileSystem, LocalFileSystem
from .name_guesser import NameGuesser, guess_project_name_from_file
from .scaffold import ScaffoldBuilder, plan_artifacts, project_file_path, suggest_build_folder
from .settings import ScaffoldSettings, load_settings

__all__ = [
    # ── Data model ───────────────────────────────────────────────────────────
    "NewlineStyle", "ScaffoldRequest", "ScaffoldResult", "GeneratedArtifact",
    "FreshProject", "AdoptBuildFile",
    "ScaffoldError", "DirectoryCreationFailed", "FileWriteFailed",
    "InvalidProjectName", "validate_project_name",
    # ── Components ───────────────────────────────────────────────────────────
    "NameGuesser", "guess_project_name_from_file",
    "ScaffoldBuilder", "plan_artifacts", "project_file_path", "suggest_build_folder",
    "FileSystem", "LocalFileSystem",
    "ScaffoldSettings", "load_settings",
]
