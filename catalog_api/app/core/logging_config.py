"""
Logging setup for the catalog service.

Request handlers run on FastAPI's worker threads and every mutation
goes through the store lock, so the log line names the thread that
wrote it.  That makes interleaved writes easy to follow in the log.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the catalog service.

    The level is applied on every call so a test or a second app can
    change it.  Handlers are only attached once.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` value, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` value.  When set, records are also appended to this
        file; its directory is created if needed.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("Catalog log file: %s", path)
