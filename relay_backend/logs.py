"""Activity log used by the API for UI feedback, mirrored to :mod:`logging`."""
from __future__ import annotations

import logging
from datetime import datetime

from .buffer import BoundedLog
from .config import LOG_LEVELS
from .models import LogEntry

logger = logging.getLogger("relay_backend")


class ActivityLog(BoundedLog[LogEntry]):
    def add_log(self, message: str, level: str = "INFO") -> None:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.append(LogEntry(timestamp=ts, level=level, message=message))
        logger.log(logging.getLevelName(level.upper()) if level.upper() in LOG_LEVELS else logging.INFO, message)


__all__ = ["ActivityLog", "logger"]
