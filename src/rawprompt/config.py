"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_PROMPT = "> "
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(slots=True)
class EditorSettings:
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    debug: bool = False


def load_settings() -> EditorSettings:
    """Load settings from ``RAWPROMPT_*`` environment variables.

    ``RAWPROMPT_DEBUG=true`` forces the DEBUG log level.
    """
    load_dotenv()

    debug = os.getenv("RAWPROMPT_DEBUG", "false").lower() == "true"
    log_level = os.getenv("RAWPROMPT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if debug:
        log_level = "DEBUG"

    return EditorSettings(
        prompt=os.getenv("RAWPROMPT_PROMPT", DEFAULT_PROMPT),
        log_level=log_level,
        log_file=os.getenv("RAWPROMPT_LOG_FILE") or None,
        debug=debug,
    )
