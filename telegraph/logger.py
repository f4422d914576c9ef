"""Logging for the ``telegraph`` namespace.

SDK modules obtain child loggers through :meth:`TelegraphLogger.get_logger`
(``telegraph.client``, ``telegraph.files``, ...).  Those carry no handlers, so
the SDK is silent until the application opts in with
:meth:`TelegraphLogger.configure` or :meth:`TelegraphLogger.configure_from_env`,
which attach JSON handlers to the ``telegraph`` namespace logger once.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME: str = "telegraph"


class _JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra=`` fields such as ``api_endpoint`` are merged in."""

    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(
            (key, value) for key, value in record.__dict__.items()
            if key not in self._BUILTIN_ATTRS and key not in log_entry
        )
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TelegraphLogger:
    """Owner of the handlers on the ``telegraph`` namespace logger.

    Usage::

        from telegraph.logger import TelegraphLogger

        TelegraphLogger.configure(logging.DEBUG, log_dir="logs")
    """

    _configured: bool = False

    _LOG_FILE: str = "telegraph.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    @staticmethod
    def get_logger(name: Optional[str] = None) -> logging.Logger:
        """Return ``telegraph`` or its child ``telegraph.<name>``; never adds handlers."""
        return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)

    @classmethod
    def configure(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
        """Attach a console handler (and a rotating file under *log_dir*) to the namespace.

        Only the first call installs handlers; later calls just adjust the level.
        """
        logger = cls.get_logger()
        logger.setLevel(level)
        if cls._configured:
            return logger

        formatter = _JsonFormatter()
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(RotatingFileHandler(
                os.path.join(log_dir, cls._LOG_FILE),
                maxBytes=cls._MAX_BYTES,
                backupCount=cls._BACKUP_COUNT,
                encoding="utf-8",
            ))
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        cls._configured = True
        return logger

    @classmethod
    def configure_from_env(cls) -> logging.Logger:
        """Configure from ``TELEGRAPH_LOG_LEVEL`` / ``TELEGRAPH_LOG_DIR``."""
        from telegraph import config

        return cls.configure(config.LOG_LEVEL, config.LOG_DIR)

    @classmethod
    def reset(cls) -> None:
        """Flush, close and detach the handlers installed by :meth:`configure`."""
        logger = cls.get_logger()
        for handler in list(logger.handlers):
            handler.flush()
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        cls._configured = False
