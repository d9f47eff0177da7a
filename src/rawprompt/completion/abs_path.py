"""
Absolute filesystem path expander.

Directory entries whose names are not valid UTF-8 are left out of the
candidates: they could not be echoed or typed back faithfully.
"""

from __future__ import annotations

import os
from pathlib import Path

from rawprompt.domain import Expander, Expansion
from rawprompt.logger import get_logger

logger = get_logger("completion.abs_path")

DIRECTORY_MARKER = "/"
FILE_MARKER = " "


def last_token(buffer: str) -> str:
    """Return the last whitespace-delimited token of ``buffer`` (``""`` if none)."""
    tokens = buffer.split()
    return tokens[-1] if tokens else ""


def is_decodable(name: str) -> bool:
    """False for names holding bytes that are not valid UTF-8 (decoded as surrogates)."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def classify(path: Path) -> str:
    """Marker appended to a candidate: ``/`` for directories, a space for files.

    Anything else (broken symlink, device, entry that vanished) gets no marker.
    """
    if path.is_dir():
        return DIRECTORY_MARKER
    if path.is_file():
        return FILE_MARKER
    return ""


class AbsPathExpander(Expander):
    """Completes the last token of the buffer when it is an absolute path."""

    def takes(self, buffer: str) -> bool:
        return os.path.isabs(last_token(buffer))

    def expand(self, buffer: str) -> Expansion:
        raw_path = last_token(buffer)
        source = Path(raw_path)
        expansion = Expansion()

        if source.exists():
            base, fragment = source, ""
        else:
            if source.parent == source:
                return expansion
            base, fragment = source.parent, source.name

        if not base.is_dir():
            logger.debug(f"Base {base} is not a directory, nothing to expand")
            return expansion

        # An existing directory typed without its trailing separator
        separator = ""
        if not fragment and not raw_path.endswith(os.sep):
            separator = os.sep

        # Listing errors abort the completion before anything is recorded
        with os.scandir(base) as it:
            names = [entry.name for entry in it if entry.name.startswith(fragment)]

        for name in names:
            if not name or not is_decodable(name):
                continue
            suffix = name[len(fragment) :]
            marker = classify(base / name)
            if not expansion.hints:
                expansion.entry = separator + suffix + marker
            expansion.add_hint(name + marker)

        logger.debug(
            f"AbsPathExpander: base={str(base)!r} fragment={fragment!r} matches={len(expansion.hints)}"
        )
        return expansion
