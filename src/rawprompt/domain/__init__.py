"""Domain layer: completion results, expander contract and errors."""

from rawprompt.domain.errors import EndOfInput
from rawprompt.domain.protocols import Expander
from rawprompt.domain.types import Expansion

__all__ = ["EndOfInput", "Expander", "Expansion"]
