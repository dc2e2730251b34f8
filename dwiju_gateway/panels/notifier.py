"""Transient user notifications (toasts).

Panels report validation problems, failures and successes through a
``Notifier``. The default implementation writes to the log; a UI binds its
own toast component instead.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that logs instead of rendering."""

    def success(self, message: str) -> None:
        logger.info("success: %s", message)

    def error(self, message: str) -> None:
        logger.warning("error: %s", message)

    def info(self, message: str) -> None:
        logger.info("info: %s", message)
