# Severity levels understood by Cloud Logging's structured-logging schema.
# https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry#LogSeverity

from __future__ import annotations
from enum import Enum
from typing import Any, Tuple

class Severity(str, Enum):
    DEFAULT = "DEFAULT"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    WARN = "WARNING"
    ERROR = "ERROR"
    ERR = "ERROR"
    CRITICAL = "CRITICAL"
    CRIT = "CRITICAL"
    ALERT = "ALERT"
    EMERGENCY = "EMERGENCY"
    DEBUG = "DEBUG"

    def __str__(self) -> str:
        return self.value

# Plain string constants; aliases hold the canonical token.
DEFAULT = Severity.DEFAULT.value
INFO = Severity.INFO.value
NOTICE = Severity.NOTICE.value
WARN = Severity.WARN.value
WARNING = Severity.WARNING.value
ERR = Severity.ERR.value
ERROR = Severity.ERROR.value
CRIT = Severity.CRIT.value
CRITICAL = Severity.CRITICAL.value
ALERT = Severity.ALERT.value
EMERGENCY = Severity.EMERGENCY.value
DEBUG = Severity.DEBUG.value

# Iterating an Enum skips aliases, so this is exactly the nine canonical tokens.
SEVERITIES: Tuple[str, ...] = tuple(s.value for s in Severity)

def is_valid_severity(candidate: Any) -> bool:
    """Report whether `candidate`, uppercased, is one of the canonical severities."""
    if not isinstance(candidate, str):
        return False
    return candidate.upper() in SEVERITIES
