"""
Ordered registry of expanders with first-match precedence.
"""

from __future__ import annotations

from collections.abc import Iterable

from rawprompt.domain import Expander, Expansion
from rawprompt.logger import get_logger

logger = get_logger("completion.chain")


class ExpanderChain:
    """Selects the first expander willing to complete the current buffer.

    Errors raised by an expander are not caught here: a failing completion
    source fails the whole line read.
    """

    def __init__(self, expanders: Iterable[Expander] = ()) -> None:
        self._expanders: list[Expander] = list(expanders)

    def __len__(self) -> int:
        return len(self._expanders)

    def register(self, expander: Expander) -> None:
        self._expanders.append(expander)
        logger.debug(f"Registered expander {expander.__class__.__name__} at position {len(self._expanders) - 1}")

    def find(self, buffer: str) -> Expander | None:
        for expander in self._expanders:
            if expander.takes(buffer):
                logger.debug(f"Expander {expander.__class__.__name__} selected for completion")
                return expander
        logger.debug("No expander matched current buffer")
        return None

    def expand(self, buffer: str) -> Expansion | None:
        expander = self.find(buffer)
        if expander is None:
            return None
        return expander.expand(buffer)
