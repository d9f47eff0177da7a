"""Completion result type."""

from dataclasses import dataclass, field

__all__ = ["Expansion"]


@dataclass(slots=True)
class Expansion:
    """Outcome of a single completion attempt.

    ``entry`` is the text to splice after the current buffer when the
    completion is unambiguous. ``hints`` holds every candidate considered,
    already formatted for display, in the order the source produced them.
    """

    entry: str = ""
    hints: list[str] = field(default_factory=list)

    def is_resolved(self) -> bool:
        """Return ``True`` when ``entry`` can be spliced without asking the user."""
        return bool(self.entry) and len(self.hints) < 2

    def add_hint(self, hint: str) -> None:
        self.hints.append(hint)

    def entry_bytes(self) -> bytes:
        return self.entry.encode("utf-8", "surrogateescape")

    def hint_listing(self) -> str:
        """Hints on their own line, tab separated, framed by CR LF."""
        return "\r\n" + "\t".join(self.hints) + "\r\n"
