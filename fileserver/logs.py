"""
Logging setup.
Diagnostics go through module loggers to stderr. The access log writes one
line per request: to stdout for status 200, to stderr for anything else.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ACCESS_FORMAT = '%(message)s'

access_logger = logging.getLogger("fileserver.access")


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


def configure_access_log(stdout=None, stderr=None) -> None:
    """(Re)attach the stdout/stderr handlers of the access logger."""
    out_handler = logging.StreamHandler(stdout or sys.stdout)
    out_handler.addFilter(_BelowWarning())
    err_handler = logging.StreamHandler(stderr or sys.stderr)
    err_handler.setLevel(logging.WARNING)

    for handler in list(access_logger.handlers):
        access_logger.removeHandler(handler)
    for handler in (out_handler, err_handler):
        handler.setFormatter(logging.Formatter(ACCESS_FORMAT))
        access_logger.addHandler(handler)
    access_logger.setLevel(logging.INFO)
    access_logger.propagate = False


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Werkzeug logs every request itself; the access log already does that
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    configure_access_log()


def log_request(status: int, remote_address: str, method: str, path: str) -> None:
    line = f"[{status}] {remote_address} {method} {path}"
    if status == 200:
        access_logger.info(line)
    else:
        access_logger.warning(line)
