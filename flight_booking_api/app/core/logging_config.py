"""
Root logger setup for the flight booking service.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where those records go.  Records always reach the console.
When ``LOG_FILE`` is set they are also appended to that file, whose
parent directory is created on demand.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console and optional file handlers to the root logger.

    Unknown level names fall back to ``INFO``.  If the root logger
    already has handlers (a test runner, or an earlier ``create_app``)
    nothing is changed.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
