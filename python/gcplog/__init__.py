__all__ = [
    "Logger", "new", "LogRecord",
    "Severity", "SEVERITIES", "is_valid_severity",
    "DEFAULT", "INFO", "NOTICE", "WARN", "WARNING", "ERR", "ERROR",
    "CRIT", "CRITICAL", "ALERT", "EMERGENCY", "DEBUG",
    "CloudFormatter", "init", "shutdown",
]
__version__ = "0.1.0"

from .severity import (
    Severity, SEVERITIES, is_valid_severity,
    DEFAULT, INFO, NOTICE, WARN, WARNING, ERR, ERROR,
    CRIT, CRITICAL, ALERT, EMERGENCY, DEBUG,
)
from .logger import Logger, LogRecord, new
from .bootstrap import CloudFormatter, init, shutdown
