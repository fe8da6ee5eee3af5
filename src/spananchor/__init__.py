"""spananchor - anchor character-offset annotations onto text trees.

Resolves ``(start, end)`` spans over a container's flattened text to
concrete tree positions, wraps them (splitting across node boundaries) and
answers which annotations cover any wrapped point.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spananchor.config import Settings

__version__ = "0.1.0"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the ``spananchor`` logger: console, plus a rotating file.

    The file handler is only added when ``settings.log.log_dir`` is set.
    Calling this twice does not duplicate handlers.
    """
    from spananchor.config import get_settings

    settings = settings if settings is not None else get_settings()
    package_logger = logging.getLogger(__name__)
    package_logger.setLevel(settings.log.level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log.level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger.addHandler(console_handler)

    log_dir = settings.log.log_dir
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"spananchor.{os.getpid()}.log"
        # File handler - detailed logging with rotation (10MB, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        package_logger.addHandler(file_handler)
        package_logger.info("Logging configured. Log file: %s", log_file.absolute())
