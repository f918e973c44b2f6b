"""CMakeLists.txt template for fresh projects."""
from __future__ import annotations

CMAKE_LISTS_NAME = "CMakeLists.txt"

# Each flag is wrapped in a generator expression so it only applies to C++
# sources; the leading ';' joins the entries into one CMake list.
COMPILE_FLAGS: tuple[str, ...] = ("-Wall", "-Wextra", "-O2", "-msse2", "-msse3")

CMAKE_LISTS_HEADER = (
    "cmake_minimum_required(VERSION 3.0)\n"
    "\n"
    "project({project_name})\n"
    "\n"
    "# To set a C++ standard:\n"
    "# set(CMAKE_CXX_STANDARD 11)\n"
    "\n"
    "add_executable({binary_name}\n"
    "  src/{source_subfolder}/main.cc\n"
    ")\n"
    "target_compile_options({binary_name} PUBLIC\n"
)


def _compile_option_lines() -> str:
    lines = []
    for i, flag in enumerate(COMPILE_FLAGS):
        sep = "" if i == 0 else ";"
        lines.append(f'  "{sep}$<$<COMPILE_LANGUAGE:CXX>:{flag}>"\n')
    return "".join(lines)


def render(project_name: str, binary_name: str, source_subfolder: str) -> str:
    header = CMAKE_LISTS_HEADER.format(
        project_name=project_name,
        binary_name=binary_name,
        source_subfolder=source_subfolder,
    )
    return header + _compile_option_lines() + ")\n"
