"""
Logging setup - configures the root logger once at application start.

Every module logs through its own `logging.getLogger(__name__)`.
SQL statements are echoed by the engine itself when DEBUG is on.
"""
import logging

from recruiting.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str = None) -> None:
    """Configure root logging (idempotent)."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )
    _configured = True
