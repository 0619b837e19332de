"""Logging configuration helpers."""

import logging

_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once for the application.

    Later calls only adjust the level.

    Args:
        level: Level name such as ``"debug"``. Defaults to ``"WARNING"``.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        if level:
            logging.getLogger().setLevel(level.upper())
        return

    logging.basicConfig(level=(level or "WARNING").upper(), format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
