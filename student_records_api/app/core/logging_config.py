"""
Logging setup for the Student Records API.

Everything logs through the root logger: service mutations, rejected
requests and the per‑request access line written by the HTTP
middleware.  ``create_app`` calls ``setup_logging`` with
``LOG_LEVEL`` and, when set, ``LOG_FILE``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach a console handler, and a file handler if ``logfile`` is set.

    Does nothing when the root logger already has handlers, so test
    runners and repeated ``create_app`` calls keep their own setup.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
