from __future__ import annotations

import logging

LOGGER = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised by repositories when the database layer fails."""

    def __init__(self, operation: str, cause: Exception) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class LoggingErrorReporter:
    def report(self, message: str, exc: Exception) -> None:
        LOGGER.error("%s (%s)", message, exc, exc_info=exc)
