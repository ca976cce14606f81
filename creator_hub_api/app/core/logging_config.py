"""
Logging configuration for the Creator Hub API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Every
module logs through ``logging.getLogger(__name__)`` so records carry
the dotted module name, e.g. ``creator_hub_api.app.services.user_service``.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs every outgoing request at INFO, which would echo each
# Stripe call including its URL.
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to mirror log records to.  If omitted, only the
        console handler is attached.
    quiet : Iterable[str]
        Logger names raised to ``WARNING`` regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
