"""
NameGuesser — pulls a project name out of an existing CMakeLists.txt.
=====================================================================

Scanning strategy (single pass, no grammar):
- Find ``project`` case-insensitively.
- Skip whitespace; the next character must be ``(``, otherwise keep scanning
  after the token.
- The first ``)`` after the ``(`` closes the call. Nested brackets are not
  tracked: ``project(foo (bar))`` reads ``foo (bar`` as the arguments.
- First argument: ``"..."`` yields everything up to the next quote (spaces
  kept); a bare token ends at the first whitespace.
- The first well-formed ``project(...)`` wins, even if the name it yields
  is empty. With no match the folder name is used.

    NameGuesser().guess('project(MyApp CXX)', "checkout")      -> "MyApp"
    NameGuesser().guess('PROJECT( "My App" )', "checkout")     -> "My App"
    NameGuesser().guess('add_executable(x x.cc)', "checkout")  -> "checkout"
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Optional

from .host import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

_TOKEN = re.compile("project", re.IGNORECASE)


class _State(Enum):
    SEEKING_TOKEN = "seeking_token"
    SEEKING_OPEN_PAREN = "seeking_open_paren"
    SEEKING_CLOSE_PAREN = "seeking_close_paren"
    EXTRACTING_ARGUMENT = "extracting_argument"
    DONE = "done"


class NameGuesser:
    """Stateless; one instance can be reused for any number of guesses."""

    def guess(self, content: Optional[str], fallback_folder_name: str) -> str:
        if content is None:
            return ""
        name = self._scan(content)
        if name is None:
            logger.debug("No project() call found; using folder name %r", fallback_folder_name)
            return fallback_folder_name
        logger.debug("Guessed project name %r from project() call", name)
        return name

    def _scan(self, text: str) -> Optional[str]:
        state = _State.SEEKING_TOKEN
        cursor = 0
        open_pos = close_pos = -1
        name: Optional[str] = None

        while state is not _State.DONE:
            if state is _State.SEEKING_TOKEN:
                match = _TOKEN.search(text, cursor)
                if match is None:
                    state = _State.DONE
                    continue
                cursor = match.end()
                state = _State.SEEKING_OPEN_PAREN

            elif state is _State.SEEKING_OPEN_PAREN:
                pos = cursor
                while pos < len(text) and text[pos].isspace():
                    pos += 1
                if pos < len(text) and text[pos] == "(":
                    open_pos = pos
                    state = _State.SEEKING_CLOSE_PAREN
                else:
                    state = _State.SEEKING_TOKEN

            elif state is _State.SEEKING_CLOSE_PAREN:
                close_pos = text.find(")", open_pos + 1)
                if close_pos < 0:
                    state = _State.SEEKING_TOKEN
                else:
                    state = _State.EXTRACTING_ARGUMENT

            elif state is _State.EXTRACTING_ARGUMENT:
                arguments = text[open_pos + 1:close_pos].strip()
                name = _first_argument(arguments)
                state = _State.DONE

        return name


def _first_argument(arguments: str) -> str:
    # An unterminated quote yields whatever follows it.
    if arguments.startswith('"'):
        end = arguments.find('"', 1)
        return arguments[1:] if end < 0 else arguments[1:end]
    for i, c in enumerate(arguments):
        if c.isspace():
            return arguments[:i]
    return arguments


def fallback_folder_name(build_file: str | Path) -> str:
    """Name of the folder containing the build file."""
    return Path(build_file).absolute().parent.name


def guess_project_name_from_file(
    build_file: str | Path,
    fs: Optional[FileSystem] = None,
) -> str:
    """
    Read build_file (UTF-8, undecodable bytes replaced) and guess from it.
    An unreadable file degrades to the folder-name fallback.
    """
    fs = fs or LocalFileSystem()
    folder_name = fallback_folder_name(build_file)
    try:
        content = fs.read_text(Path(build_file))
    except OSError as exc:
        logger.warning("Could not read %s (%s); using folder name", build_file, exc)
        return folder_name
    return NameGuesser().guess(content, folder_name)
