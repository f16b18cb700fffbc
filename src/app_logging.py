"""Root logger setup for timegrid entry points.

Library modules log through ``logging.getLogger(__name__)`` and never touch
handlers; scripts call :func:`init_logging` (or :func:`get_logger`) once.
``TIMEGRID_JSON_LOGS`` (see ``config.get_settings``) switches to one JSON
object per line.
"""
import json
import logging
from typing import Optional

from config import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_initialized = False


class JsonLineFormatter(logging.Formatter):
    """Formats a record as a JSON line.

    A dict passed as ``extra={"extra": {...}}`` is merged into the object.
    """

    def format(self, record):  # type: ignore
        payload = {
            "level": record.levelname.lower(),
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            payload.update(fields)
        return json.dumps(payload, default=str)


def _build_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonLineFormatter() if json_logs else logging.Formatter(_FORMAT))
    return handler


def init_logging(force: bool = False, level: int = logging.INFO, json_logs: Optional[bool] = None):
    """Install a single stream handler on the root logger.

    Args:
        force: Reconfigure even if already initialized
        level: Root log level
        json_logs: Override the ``json_logs`` setting
    """
    global _initialized
    if _initialized and not force:
        return
    if json_logs is None:
        json_logs = get_settings().json_logs
    logging.basicConfig(level=level, handlers=[_build_handler(json_logs)], force=True)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    if not _initialized:
        init_logging()
    return logging.getLogger(name)


__all__ = ["JsonLineFormatter", "get_logger", "init_logging"]
