"""
Scaffold Settings — host preferences that shape generated files
===============================================================
Resolution order (later wins):

    1. built-in default               newline_format: lf
    2. YAML settings file             --settings PATH, $CIDE_SCAFFOLD_SETTINGS,
                                      or ~/.config/cide/scaffold.yaml
    3. environment                    CIDE_NEWLINE_FORMAT=crlf
    4. command line                   --newline crlf

Settings file schema:

    newline_format: crlf      # lf | crlf | native
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .models import NewlineStyle

logger = logging.getLogger(__name__)

SETTINGS_ENV = "CIDE_SCAFFOLD_SETTINGS"
NEWLINE_ENV = "CIDE_NEWLINE_FORMAT"
DEFAULT_SETTINGS_PATH = Path("~/.config/cide/scaffold.yaml")

_KNOWN_KEYS = {"newline_format"}


@dataclass
class ScaffoldSettings:
    newline_format: NewlineStyle = NewlineStyle.LF
    source: Optional[Path] = None       # settings file that was read, if any


def _settings_path(explicit: str | Path | None) -> Optional[Path]:
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ.get(SETTINGS_ENV, "").strip()
    if env:
        return Path(env).expanduser()
    default = DEFAULT_SETTINGS_PATH.expanduser()
    return default if default.exists() else None


def _read_yaml(path: Path) -> dict[str, Any]:
    import yaml  # type: ignore[import-untyped]

    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"'{path}': {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"'{path}': expected a mapping at the top level")
    return raw


def load_settings(path: str | Path | None = None) -> ScaffoldSettings:
    """
    Resolve settings from file and environment.

    Raises
    ------
    FileNotFoundError  — an explicitly named settings file doesn't exist
    ValueError         — invalid newline_format in file or environment
    """
    settings = ScaffoldSettings()

    settings_path = _settings_path(path)
    if settings_path is not None:
        if not settings_path.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_path}")
        raw = _read_yaml(settings_path)
        for key in raw:
            if key not in _KNOWN_KEYS:
                logger.debug("Ignoring unknown settings key '%s' in %s", key, settings_path)
        if raw.get("newline_format") is not None:
            try:
                settings.newline_format = NewlineStyle.parse(str(raw["newline_format"]))
            except ValueError as exc:
                raise ValueError(f"'{settings_path}': {exc}") from exc
        settings.source = settings_path
        logger.debug("Loaded settings from %s", settings_path)

    env_value = os.environ.get(NEWLINE_ENV, "").strip()
    if env_value:
        try:
            settings.newline_format = NewlineStyle.parse(env_value)
        except ValueError as exc:
            raise ValueError(f"{NEWLINE_ENV}: {exc}") from exc

    return settings
