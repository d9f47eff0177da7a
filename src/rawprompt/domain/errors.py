"""Errors raised by the line editor."""

__all__ = ["EndOfInput"]


class EndOfInput(EOFError):
    """The user pressed EOT (Ctrl-D) or the input stream ran dry.

    Signals that the caller should stop asking for lines.
    """
