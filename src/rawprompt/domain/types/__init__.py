"""Domain types."""

from rawprompt.domain.types.expansion import Expansion

__all__ = ["Expansion"]
