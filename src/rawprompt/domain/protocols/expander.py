"""Expander protocol."""

from typing import Protocol

from rawprompt.domain.types import Expansion

__all__ = ["Expander"]


class Expander(Protocol):
    """Contract implemented by every completion source.

    An editor asks each registered expander, in registration order,
    whether it ``takes`` the current buffer. The first one that does is
    asked to ``expand`` it; the rest are not consulted.
    """

    def takes(self, buffer: str) -> bool:
        """Return ``True`` when this expander should complete ``buffer``.

        Must be cheap and free of side effects: it runs on every Tab press.
        """
        ...

    def expand(self, buffer: str) -> Expansion:
        """Produce completion candidates for ``buffer``.

        Args:
            buffer: The full line being edited

        Returns:
            A freshly built Expansion

        Raises:
            OSError: If the completion source cannot be queried
        """
        ...
