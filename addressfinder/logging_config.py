"""
Address Finder - Centralized Logging Configuration

Sets up rotating file handlers for the application.  Call ``setup_logging()``
once at startup (in main.py) before any module creates a logger.

All modules should use named loggers under the ``addressfinder`` namespace::

    logger = logging.getLogger("addressfinder.search")
    logger.info("Lookup for %r returned %d address(es)", query, count)
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_DIR = os.path.expanduser("~/.addressfinder/logs/")


def setup_logging(log_dir: str = LOG_DIR) -> None:
    """Configure the root ``addressfinder`` logger.

    - Log file: ``~/.addressfinder/logs/addressfinder.log`` (all levels)
    - Rotation: 5 MB per file, 3 backup copies
    - Console: WARNING and above to stderr
    """
    root = logging.getLogger("addressfinder")
    # Avoid adding handlers twice if called more than once
    if root.handlers:
        return
    os.makedirs(log_dir, exist_ok=True)
    root.setLevel(logging.DEBUG)

    fh = RotatingFileHandler(
        os.path.join(log_dir, "addressfinder.log"),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    )
    root.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.WARNING)
    ch.setFormatter(
        logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
    )
    root.addHandler(ch)
