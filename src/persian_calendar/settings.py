import os
from dataclasses import dataclass

DEFAULT_ZONE = "Asia/Tehran"
DEFAULT_PATTERN = "yyyy/MM/dd HH:mm:ss"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Defaults for the command-line entry point; the library API never reads these."""

    zone: str = DEFAULT_ZONE
    pattern: str = DEFAULT_PATTERN
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    return Settings(
        zone=os.getenv("PERSIAN_CALENDAR_ZONE") or DEFAULT_ZONE,
        pattern=os.getenv("PERSIAN_CALENDAR_FORMAT") or DEFAULT_PATTERN,
        log_level=(os.getenv("PERSIAN_CALENDAR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
