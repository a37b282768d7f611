"""
Logging setup for the feature flag service.

The service keeps no state on disk, so by default it only logs to the
console, where uvicorn's own output also goes.  Setting ``LOG_FILE``
adds a file handler for deployments that want a record of flag
changes (the store logs every create, update and delete at INFO).
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service's handlers to the root logger.

    ``create_app`` calls this for every app it builds and the tests
    build one app per test, so the call does nothing once the root
    logger already has handlers.  Unknown level names fall back to
    ``INFO``.  ``logfile`` comes from ``settings.log_file``; an empty
    value keeps logging on the console only.
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
