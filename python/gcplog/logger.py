# Severity-aware print facade that writes Cloud Logging structured JSON to stdout.
# Each call emits {"severity": ..., "message": ...} as compact single-line JSON.

from __future__ import annotations
import json, os, re, sys
from typing import Any, Callable, Mapping, NamedTuple, Optional, Protocol, Tuple
from .severity import DEFAULT, SEVERITIES, Severity

class _Writable(Protocol):
    def write(self, s: str) -> Any: ...
    def flush(self) -> Any: ...

class LogRecord(NamedTuple):
    severity: str
    message: str

# Called by the fatal variants once the record is flushed. os._exit ends the
# process from any thread and cannot be caught; replace it to intercept.
exit_hook: Callable[[int], Any] = os._exit

def encode_record(rec: LogRecord) -> str:
    """Serialize a record as compact ASCII-only JSON, `severity` first."""
    return json.dumps(rec._asdict(), separators=(",", ":"))

# "%%" is kept; "%v" with optional flags, width and precision becomes "%s".
_VERB = re.compile(r"%(%|[-#0 +]*\d*(?:\.\d+)?v)")

def _verb(m: re.Match) -> str:
    spec = m.group(1)
    return "%%" if spec == "%" else "%" + spec[:-1] + "s"

def _sprint(args: Tuple[Any, ...]) -> str:
    # Operands are joined directly; a space goes only between two non-strings.
    out = []
    for i, arg in enumerate(args):
        if i and not isinstance(arg, str) and not isinstance(args[i - 1], str):
            out.append(" ")
        out.append(str(arg))
    return "".join(out)

def _sprintf(fmt: str, args: Tuple[Any, ...]) -> str:
    fmt = str(fmt)
    if not args:
        return fmt
    # Same single-mapping rule as logging.LogRecord.getMessage.
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    return _VERB.sub(_verb, fmt) % values

def _canonical(candidate: Any) -> Optional[str]:
    if isinstance(candidate, str) and candidate in SEVERITIES:
        return Severity(candidate).value
    return None

class Logger:
    """Writes print-style messages as structured log lines at one severity.

    Construction takes the severity only on an exact, case-sensitive match
    against the canonical tokens and otherwise falls back to DEFAULT.
    `set_severity` is case-insensitive. Neither reports rejected input.

    Not safe for concurrent use; serialize calls externally.
    """

    def __init__(self, severity: Any = DEFAULT, *, stream: Optional[_Writable] = None, terminator: str = "") -> None:
        self._severity: str = _canonical(severity) or DEFAULT
        self._stream = stream
        self.terminator = terminator

    def __repr__(self) -> str:
        return f"Logger(severity={self._severity!r})"

    @property
    def severity(self) -> str:
        return self._severity

    def set_severity(self, candidate: Any) -> None:
        """Switch to `candidate` (any case) if it names a severity; otherwise do nothing."""
        if isinstance(candidate, str):
            self._severity = _canonical(candidate.upper()) or self._severity

    def print(self, *args: Any) -> None:
        self._emit(_sprint(args))

    def printf(self, fmt: str, *args: Any) -> None:
        """Log `fmt % args`; `%v` works like `%s`.

        With no `args` the format is logged unchanged, so `printf("100%% done")`
        logs "100%% done". Use `print` for plain text.
        """
        self._emit(_sprintf(fmt, args))

    def fatal(self, *args: Any) -> None:
        """Like `print`, then exit the process with status 1."""
        self._emit(_sprint(args))
        exit_hook(1)

    def fatalf(self, fmt: str, *args: Any) -> None:
        """Like `printf`, then exit the process with status 1."""
        self._emit(_sprintf(fmt, args))
        exit_hook(1)

    def prefix_print(self, *args: Any) -> None:
        """Like `print`, with the message prefixed by "<SEVERITY>: "."""
        self._emit(_sprint((self._severity, ": ") + args))

    def prefix_printf(self, fmt: str, *args: Any) -> None:
        self._emit(self._prefix() + _sprintf(fmt, args))

    def prefix_fatal(self, *args: Any) -> None:
        self._emit(_sprint((self._severity, ": ") + args))
        exit_hook(1)

    def prefix_fatalf(self, fmt: str, *args: Any) -> None:
        self._emit(self._prefix() + _sprintf(fmt, args))
        exit_hook(1)

    def _prefix(self) -> str:
        return f"{self._severity}: "

    def _emit(self, text: str) -> None:
        line = encode_record(LogRecord(severity=self._severity, message=text.strip()))
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + self.terminator)
        stream.flush()

def new(severity: Any = None, **kwargs: Any) -> Logger:
    """Return a Logger at `severity`, or at DEFAULT when it is missing or not an exact match."""
    return Logger(DEFAULT if severity is None else severity, **kwargs)
