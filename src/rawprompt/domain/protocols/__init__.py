"""Domain protocols - interfaces for pluggable components."""

from rawprompt.domain.protocols.expander import Expander

__all__ = ["Expander"]
