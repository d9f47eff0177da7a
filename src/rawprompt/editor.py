"""
Interactive line editor with pluggable tab completion.

The editor reads raw keystrokes one byte at a time, echoes them, handles
backspace, and hands Tab presses to the registered expanders.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import IO, Optional

from rawprompt.completion import ExpanderChain
from rawprompt.domain import EndOfInput, Expander, Expansion
from rawprompt.logger import get_logger
from rawprompt.terminal import raw_mode

logger = get_logger("editor")

KEY_EOT = 4
KEY_TAB = 9
KEY_ENTER = 13
KEY_ESC = 27
KEY_BACKSPACE = 127

CRLF = b"\r\n"
ERASE = b"\x08 \x08"

RawModeFactory = Callable[[IO[bytes]], AbstractContextManager]


class LineEditor:
    """Reads one line at a time from a raw byte stream.

    The editor is single-threaded: each keystroke, including any filesystem
    work done by an expander, is fully processed before the next byte is read.
    """

    def __init__(
        self,
        prompt: str = "",
        input: Optional[IO[bytes]] = None,
        output: Optional[IO[bytes]] = None,
        raw_mode: RawModeFactory = raw_mode,
    ) -> None:
        """
        Args:
            prompt: Text written before the line and on every redraw
            input: Byte stream of keypresses (defaults to ``sys.stdin.buffer``)
            output: Byte sink for echo (defaults to ``sys.stdout.buffer``)
            raw_mode: Factory returning the raw-mode scope for the input stream
        """
        self._prompt = prompt
        self._input = input
        self._output = output
        self._raw_mode = raw_mode
        self._buffer = ""
        self._expanders = ExpanderChain()

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def buffer(self) -> str:
        return self._buffer

    def set_prompt(self, prompt: str) -> None:
        self._prompt = prompt

    def register(self, expander: Expander) -> None:
        """Append ``expander``; earlier registrations take precedence."""
        self._expanders.register(expander)

    def complete(self) -> Expansion | None:
        """Run the expander chain against the current buffer."""
        return self._expanders.expand(self._buffer)

    def done(self) -> str:
        """Hand the finished line to the caller and start a fresh one."""
        line = self._buffer
        self._buffer = ""
        return line

    def read_line(self) -> str:
        """Block until Enter and return the line typed.

        Any failure discards the partial line, so a later call starts empty.

        Raises:
            EndOfInput: On EOT or when the input stream is exhausted
            OSError: When reading, writing or completing fails
        """
        stdin = self._input if self._input is not None else sys.stdin.buffer
        stdout = self._output if self._output is not None else sys.stdout.buffer

        with self._raw_mode(stdin):
            try:
                return self._edit(stdin, stdout)
            except BaseException:
                self._buffer = ""
                raise

    def _edit(self, stdin: IO[bytes], stdout: IO[bytes]) -> str:
        stdout.write(self._prompt.encode("utf-8", "surrogateescape"))
        stdout.flush()

        while True:
            chunk = stdin.read(1)
            if not chunk:
                logger.debug("Input stream exhausted")
                raise EndOfInput("input stream closed")

            key = chunk[0]
            if key == KEY_ENTER:
                stdout.write(CRLF)
                stdout.flush()
                line = self.done()
                logger.debug(f"Line finished ({len(line)} chars)")
                return line
            elif key == KEY_EOT:
                logger.debug("EOT received, discarding buffer")
                raise EndOfInput("end of input")
            elif key == KEY_ESC:
                pass
            elif key == KEY_BACKSPACE:
                self._backspace(stdout)
            elif key == KEY_TAB:
                self._tab(stdout)
            else:
                self._buffer += chr(key)
                stdout.write(chunk)

            stdout.flush()

    def _backspace(self, stdout: IO[bytes]) -> None:
        if not self._buffer:
            return
        self._buffer = self._buffer[:-1]
        stdout.write(ERASE)

    def _tab(self, stdout: IO[bytes]) -> None:
        expansion = self.complete()
        if expansion is None:
            return

        if expansion.is_resolved():
            self._buffer += expansion.entry
            stdout.write(expansion.entry_bytes())
            return

        logger.debug(f"Ambiguous completion, showing {len(expansion.hints)} hint(s)")
        stdout.write(expansion.hint_listing().encode("utf-8", "surrogateescape"))
        stdout.write(self._prompt.encode("utf-8", "surrogateescape"))
        stdout.write(self._buffer.encode("utf-8", "surrogateescape"))
