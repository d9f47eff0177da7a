"""
Completion sources for the line editor.

Expanders are tried in registration order by ``ExpanderChain``; the first
one that takes the buffer produces the ``Expansion``.
"""

from .chain import ExpanderChain
from .abs_path import AbsPathExpander, classify, last_token

__all__ = [
    "ExpanderChain",
    "AbsPathExpander",
    "classify",
    "last_token",
]
