"""
Logging configuration for the registration service.

``setup_logging`` derives everything from ``Settings``: the level
applied to this package and to uvicorn's loggers, the optional log
file, and a floor for the MongoDB driver loggers, which log every
command at ``DEBUG``.  ``uvicorn_log_level`` translates the same
setting into the name uvicorn's ``Config`` expects, so the server and
the application never disagree about verbosity.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVICE_LOGGERS = ("registration_api", "uvicorn", "uvicorn.error", "uvicorn.access")
DRIVER_LOGGERS = ("pymongo", "motor")

_UVICORN_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give ``INFO``."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def uvicorn_log_level(settings: Settings) -> str:
    name = settings.log_level.strip().lower()
    return name if name in _UVICORN_LEVELS else "info"


def setup_logging(settings: Settings) -> None:
    """Apply ``settings.log_level`` and attach handlers once.

    Named loggers get their level on every call, so an application
    built with different settings in the same process takes effect.
    Handlers are only attached when the root logger has none, which
    leaves hosts that configure logging themselves alone.
    """
    level = resolve_level(settings.log_level)
    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
