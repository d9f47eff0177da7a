"""Raw terminal mode as a scoped resource."""

from __future__ import annotations

import io
import os
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

from rawprompt.logger import get_logger

logger = get_logger("terminal")


def _tty_fd(stream: IO[bytes]) -> int | None:
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def raw_mode(stream: IO[bytes]) -> Iterator[None]:
    """Put the terminal behind ``stream`` in raw mode for the duration of the block.

    Keystrokes arrive one byte at a time with no local echo. The previous
    terminal attributes are restored however the block exits. Streams that
    are not attached to a TTY are left alone.
    """
    fd = _tty_fd(stream)
    if fd is None:
        yield
        return

    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    logger.debug(f"Entered raw mode on fd {fd}")
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug(f"Restored terminal attributes on fd {fd}")
