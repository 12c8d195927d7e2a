# Bridge for the standard logging package: records from logging.getLogger(...)
# come out in the same structured JSON shape as gcplog.Logger.

from __future__ import annotations
import logging, sys
from typing import Any, Dict, Optional, TextIO
from .logger import LogRecord, encode_record
from .severity import CRITICAL, DEBUG, DEFAULT, ERROR, INFO, WARNING

_global_cfg: Dict[str, Any] = {}
_global_handler: Optional[logging.Handler] = None

# Highest threshold first; anything below DEBUG (e.g. NOTSET) is DEFAULT.
_LEVELS = (
    (logging.CRITICAL, CRITICAL),
    (logging.ERROR, ERROR),
    (logging.WARNING, WARNING),
    (logging.INFO, INFO),
    (logging.DEBUG, DEBUG),
)

def severity_for_level(levelno: int) -> str:
    for threshold, severity in _LEVELS:
        if levelno >= threshold:
            return severity
    return DEFAULT

class CloudFormatter(logging.Formatter):
    """Formats a logging.LogRecord as {"severity": ..., "message": ...}.

    Exception and stack information are appended to the message the same way
    logging.Formatter appends them to its text output.
    """

    def __init__(self, prefix: bool = False) -> None:
        super().__init__()
        self.prefix = prefix

    def format(self, record: logging.LogRecord) -> str:
        severity = severity_for_level(record.levelno)
        text = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        if record.stack_info:
            text = f"{text}\n{self.formatStack(record.stack_info)}"
        if self.prefix:
            text = f"{severity}: {text}"
        return encode_record(LogRecord(severity=severity, message=text.strip()))

def init(
    level: int = logging.INFO,
    logger_name: Optional[str] = None,
    prefix: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a stdout handler using CloudFormatter to `logger_name` (root by default).

    A handler left by an earlier `init` is removed first.
    """
    global _global_cfg, _global_handler
    shutdown()
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(CloudFormatter(prefix=prefix))
    target = logging.getLogger(logger_name)
    _global_cfg = {
        "logger_name": logger_name,
        "previous_level": target.level,
    }
    target.setLevel(level)
    target.addHandler(handler)
    _global_handler = handler
    return handler

def shutdown() -> None:
    """Flush and detach the handler installed by `init` and restore the logger's
    previous level (no-op when none)."""
    global _global_cfg, _global_handler
    if _global_handler is None:
        return
    target = logging.getLogger(_global_cfg["logger_name"])
    target.removeHandler(_global_handler)
    target.setLevel(_global_cfg["previous_level"])
    _global_handler.flush()
    _global_handler.close()
    _global_cfg = {}
    _global_handler = None
