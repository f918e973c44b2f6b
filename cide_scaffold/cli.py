#!/usr/bin/env python3
"""
CLI Entry Point — create CIDE projects from the terminal
========================================================
Usage:
    cide-scaffold new foo ~/projects/foo
    cide-scaffold adopt ~/src/lib/CMakeLists.txt --build-dir ~/src/lib/build-release
    cide-scaffold guess ~/src/lib/CMakeLists.txt

    cide-scaffold --newline crlf new foo ./foo --dry-run

The newline convention comes from --newline, else CIDE_NEWLINE_FORMAT, else
the settings file (see cide_scaffold.settings).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import (
    InvalidProjectName,
    NewlineStyle,
    ScaffoldRequest,
    validate_project_name,
)
from .name_guesser import guess_project_name_from_file
from .scaffold import ScaffoldBuilder, plan_artifacts, project_file_path, suggest_build_folder
from .settings import load_settings

logger = logging.getLogger("cide_scaffold.cli")

_NEWLINE_CHOICES = ["lf", "crlf", "native"]


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


def _newline_style(args) -> NewlineStyle:
    if args.newline:
        return NewlineStyle.parse(args.newline)
    return load_settings(args.settings).newline_format


def _print_plan(request: ScaffoldRequest) -> None:
    root = project_file_path(request).parent
    print(f"Dry run: would write into {root}")
    for artifact in plan_artifacts(request):
        print(f"\n--- {artifact.relative_path} ---")
        print(artifact.content.replace("\r\n", "\n"), end="")


def _run(request: ScaffoldRequest, dry_run: bool) -> int:
    if dry_run:
        _print_plan(request)
        return 0
    result = ScaffoldBuilder().build(request)
    if not result.success:
        print(f"ERROR: {result.message}", file=sys.stderr)
        if result.written:
            print("Files already written (not removed):", file=sys.stderr)
            for path in result.written:
                print(f"  {path}", file=sys.stderr)
        return 1
    print(result.project_file)
    return 0


def cmd_new(args, parser: argparse.ArgumentParser) -> int:
    try:
        name = validate_project_name(args.name)
    except InvalidProjectName as exc:
        parser.error(str(exc))
    request = ScaffoldRequest(
        project_name=name,
        target_folder=Path(args.folder),
        newline_style=_newline_style(args),
    )
    return _run(request, args.dry_run)


def cmd_adopt(args, parser: argparse.ArgumentParser) -> int:
    build_file = Path(args.build_file)
    if not build_file.is_file():
        parser.error(f"Build file does not exist: {build_file}")

    name: Optional[str] = args.name
    if name is None:
        name = guess_project_name_from_file(build_file)
        logger.info("Using guessed project name '%s'", name)
    try:
        name = validate_project_name(name)
    except InvalidProjectName as exc:
        parser.error(str(exc))

    build_dir = Path(args.build_dir) if args.build_dir else suggest_build_folder(build_file)
    request = ScaffoldRequest(
        project_name=name,
        target_folder=build_dir,
        existing_build_file=build_file,
        newline_style=_newline_style(args),
    )
    return _run(request, args.dry_run)


def cmd_guess(args, parser: argparse.ArgumentParser) -> int:
    build_file = Path(args.build_file)
    if not build_file.is_file():
        parser.error(f"Build file does not exist: {build_file}")
    print(guess_project_name_from_file(build_file))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cide-scaffold",
        description="Create CIDE project files for new or existing CMake projects",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--settings", type=str, default=None, metavar="PATH",
                        help="YAML settings file (default: ~/.config/cide/scaffold.yaml)")
    parser.add_argument("--newline", choices=_NEWLINE_CHOICES, default=None,
                        help="Line endings of generated files (default: from settings)")

    # Accepted after the subcommand too; SUPPRESS keeps the top-level value when absent
    newline_opts = argparse.ArgumentParser(add_help=False)
    newline_opts.add_argument("--newline", choices=_NEWLINE_CHOICES, default=argparse.SUPPRESS,
                              help="Line endings of generated files (default: from settings)")

    subparsers = parser.add_subparsers(dest="subcommand", metavar="SUBCOMMAND")
    subparsers.required = True

    new_p = subparsers.add_parser(
        "new", parents=[newline_opts],
        help="Create a new project with CMakeLists.txt and src/",
    )
    new_p.add_argument("name", help="Project name (must be a valid filename)")
    new_p.add_argument("folder", help="Project folder (created if missing)")
    new_p.add_argument("--dry-run", action="store_true",
                       help="Print the files that would be written, then exit")
    new_p.set_defaults(func=cmd_new)

    adopt_p = subparsers.add_parser(
        "adopt", parents=[newline_opts],
        help="Create a project file for an existing CMakeLists.txt",
    )
    adopt_p.add_argument("build_file", help="Path to the existing CMakeLists.txt")
    adopt_p.add_argument("--name", type=str, default=None,
                         help="Project name (default: guessed from project())")
    adopt_p.add_argument("--build-dir", type=str, default="",
                         help="Build folder (default: first build* folder next to the file)")
    adopt_p.add_argument("--dry-run", action="store_true",
                         help="Print the files that would be written, then exit")
    adopt_p.set_defaults(func=cmd_adopt)

    guess_p = subparsers.add_parser("guess", help="Print the project name guessed from a CMakeLists.txt")
    guess_p.add_argument("build_file")
    guess_p.set_defaults(func=cmd_guess)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv(override=True)  # .env values win over empty system env vars
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(args, "verbose", False))
    try:
        return args.func(args, parser)
    except (ValueError, FileNotFoundError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
