"""rawprompt: a raw-mode terminal line editor with pluggable tab completion."""

from rawprompt.completion import AbsPathExpander, ExpanderChain
from rawprompt.domain import EndOfInput, Expander, Expansion
from rawprompt.editor import LineEditor

__version__ = "0.1.0"

__all__ = [
    "AbsPathExpander",
    "EndOfInput",
    "Expander",
    "ExpanderChain",
    "Expansion",
    "LineEditor",
]
