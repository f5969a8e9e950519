"""Process-wide logging for the service (stdout, level from settings)."""

import logging
import sys

from modelcdn.core.config import get_settings

# Per-request INFO lines from the outbound client used for URL uploads
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging() -> None:
    """Log to stdout at DEBUG when settings.debug, else INFO.

    Outbound HTTP client loggers stay at WARNING unless debugging; failed
    fetches are logged by the fetcher itself.
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)
