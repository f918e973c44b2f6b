"""<project_name>.cide descriptor templates."""
from __future__ import annotations

FRESH_PROJECT_FILE = (
    "name: {project_name}\n"
    "projectCMakeDir: build\n"
    "buildDir: build\n"
    "buildTarget: {binary_name}\n"
    "runDir: build\n"
    "runCmd: ./{binary_name}\n"
)

# No buildTarget: the existing CMakeLists.txt decides what gets built.
ADOPTED_PROJECT_FILE = (
    "name: {project_name}\n"
    "projectCMakeDir: {build_dir}\n"
    "buildDir: {build_dir}\n"
    "runDir: {build_dir}\n"
    "runCmd: ./{binary_name}\n"
)

PROJECT_FILE_SUFFIX = ".cide"


def render_fresh(project_name: str, binary_name: str) -> str:
    return FRESH_PROJECT_FILE.format(project_name=project_name, binary_name=binary_name)


def render_adopted(project_name: str, binary_name: str, build_dir: str) -> str:
    return ADOPTED_PROJECT_FILE.format(
        project_name=project_name,
        binary_name=binary_name,
        build_dir=build_dir,
    )
