import logging, sys
from logging.handlers import RotatingFileHandler
from typing import IO

import sentry_sdk
from pythonjsonlogger import jsonlogger

from .config import settings

# handlers added to the root logger by the last setup_logging() call
_installed: list[logging.Handler] = []


def _formatter() -> logging.Formatter:
    if settings.log_json:
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
    return logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")


def setup_logging(
    level: str | None = None, stream: IO[str] | None = None
) -> list[logging.Handler]:
    """Install the project's handlers on the root logger.

    ``level`` overrides ``settings.log_level``.  Console output goes to
    ``stream`` (stdout by default); commands whose stdout is data, such as
    ``drivers fetch``, pass ``sys.stderr``.  A rotating file handler is added
    when ``settings.log_file`` is set.  Calling this again replaces the
    handlers installed by the previous call instead of stacking them.
    """
    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    handlers: list[logging.Handler] = [
        logging.StreamHandler(stream if stream is not None else sys.stdout)
    ]
    if settings.log_file:
        handlers.append(
            RotatingFileHandler(
                settings.log_file,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
            )
        )

    formatter = _formatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    _installed.extend(handlers)

    level_name = (level or settings.log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.env)
    return handlers
