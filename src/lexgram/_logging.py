"""Helpers for configuring consistent logging output."""

from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ENV_LEVEL = "LEXGRAM_LOG_LEVEL"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, logging.INFO)


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Install a stderr handler for lexgram's loggers.

    The level comes from ``level``, else the ``LEXGRAM_LOG_LEVEL``
    environment variable, else INFO. Results go to stdout, so diagnostics
    never mix with them.
    """
    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(_ENV_LEVEL)
    resolved_level = _resolve_level(level if level is not None else env_level)

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("lexgram").setLevel(resolved_level)
    _CONFIGURED = True
