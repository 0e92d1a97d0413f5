"""Logging setup for the launcher."""

import logging
import logging.handlers
from pathlib import Path

SYSLOG_IDENTIFIER = "rand-alacritty"
SYSLOG_SOCKET = "/dev/log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _syslog_handler(socket_path: str) -> logging.Handler | None:
    if not Path(socket_path).exists():
        return None
    try:
        handler = logging.handlers.SysLogHandler(address=socket_path)
    except OSError:
        return None
    handler.ident = f"{SYSLOG_IDENTIFIER}: "
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    return handler


def configure_logging(socket_path: str = SYSLOG_SOCKET) -> None:
    """Send log records to the system log, or to stderr when it is unavailable."""
    handler = _syslog_handler(socket_path)
    if handler is None:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
        return

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
