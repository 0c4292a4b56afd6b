from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = logging.WARNING


def get_prompt() -> str:
    return os.environ.get('MINISCHEME_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get('MINISCHEME_LOG_LEVEL')
    if not raw:
        return _DEFAULT_LOG_LEVEL
    # getLevelName maps known names to ints and anything else to a string
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL
