"""SDK configuration -- environment variables and derived constants.

Loads ``TELEGRAPH_*`` settings from the environment via ``python-dotenv``.
All values are resolved at import time; the module is imported lazily by
:meth:`telegraph.client.TelegraphClient.from_env` so that merely importing
the SDK never reads ``.env``.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── telegraph ────────────────────────────────────────────────────────────────
from telegraph.endpoints import DEFAULT_BASE_URL
from telegraph.logger import TelegraphLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_TIMEOUT: int = 10


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None) -> int:
    """Parse a positive timeout in seconds, falling back to :data:`DEFAULT_TIMEOUT`."""
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = int(raw.strip())
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def _parse_log_level(raw: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant."""
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("TELEGRAPH_BOT_TOKEN") or None
BASE_URL: str = os.environ.get("TELEGRAPH_BASE_URL") or DEFAULT_BASE_URL
REQUEST_TIMEOUT: int = _parse_timeout(os.environ.get("TELEGRAPH_TIMEOUT"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("TELEGRAPH_LOG_LEVEL"))
LOG_DIR: str | None = os.environ.get("TELEGRAPH_LOG_DIR") or None


# ── Startup diagnostics ─────────────────────────────────────────────────────

# Handlers are the application's choice: see TelegraphLogger.configure_from_env().
logger = TelegraphLogger.get_logger("config")

if BOT_TOKEN:
    logger.debug("Config loaded: TELEGRAPH_BOT_TOKEN is set", extra={"base_url": BASE_URL})
else:
    logger.debug("Config loaded: TELEGRAPH_BOT_TOKEN is NOT set")

logger.debug("Request timeout resolved", extra={"timeout": REQUEST_TIMEOUT})
