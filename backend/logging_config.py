"""Root logger setup for syslog, file or stdout destinations."""

import logging
import logging.handlers
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
# syslog stamps its own time
SYSLOG_FORMAT = 'temperature-exporter: %(name)s - %(levelname)s - %(message)s'
SYSLOG_ADDRESS = '/dev/log'

LEVELS = {
    'trace': logging.DEBUG,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
    'fatal': logging.CRITICAL,
    'panic': logging.CRITICAL,
}


def parse_level(name: str) -> int:
    """Map a configured level name to a logging level, WARNING if unknown."""
    return LEVELS.get((name or '').strip().lower(), logging.WARNING)


def configure_logging(level: str, destination: str, filename: str = None) -> logging.Handler:
    """Replace the root logger's handlers with one for ``destination``."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    failure = None
    destination = (destination or '').lower()

    if destination == 'syslog':
        try:
            handler = _syslog_handler()
        except OSError as e:
            failure = e
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
    elif destination == 'file':
        try:
            handler = logging.FileHandler(filename)
        except OSError as e:
            failure = e
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(parse_level(level))

    if failure is not None:
        logging.getLogger(__name__).error(f"failed to configure {destination} logger: {failure}")

    return handler


def _syslog_handler() -> logging.Handler:
    # SysLogHandler ignores connection errors, so check the socket first
    if not os.path.exists(SYSLOG_ADDRESS):
        raise FileNotFoundError(f"syslog socket {SYSLOG_ADDRESS} not found")
    handler = logging.handlers.SysLogHandler(address=SYSLOG_ADDRESS)
    handler.setFormatter(logging.Formatter(SYSLOG_FORMAT))
    return handler
