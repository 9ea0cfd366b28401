"""Alert runtime exception policy helpers."""

from __future__ import annotations

import logging


class NoHostAvailable(RuntimeError):
    """No presentation surface could be resolved from the host root."""


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)
