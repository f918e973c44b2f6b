"""Fixed file templates written by the scaffold builder."""
from __future__ import annotations

from cide_scaffold.models import NewlineStyle


def apply_newline_style(text: str, style: NewlineStyle) -> str:
    """Templates are authored with LF; substitute every terminator for CRLF."""
    if style is NewlineStyle.CRLF:
        return text.replace("\n", "\r\n")
    return text
