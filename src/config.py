import os
from dataclasses import dataclass

from exceptions import InvalidConfiguration

_TRUTHY = ("1", "true", "yes")


@dataclass
class _Settings:
    requested_interval_minutes: int = 30
    source_interval_minutes: int = 5
    write_placeholders: bool = False
    json_logs: bool = False

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidConfiguration(name, f"expected an integer, got {raw!r}") from e

def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY

def get_settings() -> _Settings:
    return _Settings(
        requested_interval_minutes=_env_int("TIMEGRID_REQUESTED_INTERVAL", 30),
        source_interval_minutes=_env_int("TIMEGRID_SOURCE_INTERVAL", 5),
        write_placeholders=_env_flag("TIMEGRID_WRITE_PLACEHOLDERS"),
        json_logs=_env_flag("TIMEGRID_JSON_LOGS"),
    )

__all__ = ["get_settings", "_Settings"]
