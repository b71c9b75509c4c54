import logging
from logging.handlers import RotatingFileHandler
from typing import Optional, Union


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


class TruncateLongMsgs(logging.Filter):
    """Truncates very long log messages to keep console readable."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if self.max_len and len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False  # guard against double-initialisation


def _as_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def setup_logging(
    *,
    level: Union[int, str] = logging.WARNING,
    console: bool = True,
    console_truncate_len: int = 300,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_level: Optional[Union[int, str]] = None,
    file_max_bytes: int = 5_000_000,
    file_backup_count: int = 3,
) -> None:
    """
    Configure root logging once. Call this from the application's entry point.

    - Library modules never call this; they just use `logging.getLogger(__name__)`.
    - Adds a console handler (with optional truncation) and an optional rotating file handler.
    - `level` accepts a number or a level name such as "DEBUG".
    """
    global _configured
    if _configured:
        return

    level = _as_level(level)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        if console_truncate_len and console_truncate_len > 0:
            ch.addFilter(TruncateLongMsgs(console_truncate_len))
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count, encoding="utf-8"
        )
        fh.setLevel(_as_level(file_level) if file_level is not None else level)
        fh.setFormatter(formatter)
        # keep full messages in files
        root.addHandler(fh)

    _configured = True
    logging.getLogger(__name__).debug("🚀 Logging initialised (level=%s)", logging.getLevelName(level))
