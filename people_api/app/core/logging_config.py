"""
Logging setup for the People Management API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Modules in
the package log through ``logging.getLogger(__name__)`` and inherit
this configuration; uvicorn's own loggers are left untouched.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        When given, records are also appended to this file (UTF‑8).
    """
    root = logging.getLogger()
    if root.handlers:
        # Test runners and repeated ``create_app`` calls land here.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).debug("Logging configured at level %s", level.upper())
