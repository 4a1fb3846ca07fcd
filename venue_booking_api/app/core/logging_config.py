"""
Logging configuration for the booking API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  Record and date formats come
from ``Settings`` (``LOG_FORMAT``/``LOG_DATE_FORMAT``) so a deployment
can switch to a terser or machine-parsable layout without code changes.
The root logger is configured once; later calls, for example from tests
that build several apps, leave it untouched.
"""

import logging
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATE_FORMAT,
) -> None:
    """Configure the root logger for the booking API.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``.  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        File that receives the same records as the console.  Parent
        directories are created as needed.
    fmt, datefmt : str
        ``logging.Formatter`` record and timestamp formats shared by
        both handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
