"""
Mutable state of one strip run: destination stack, charset, status and the
diagnostics collected along the way.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Protocol

from rtf2text.parsing.rtf.charsets import CharsetResolver

logger = logging.getLogger(__name__)


class ReturnCode(enum.IntEnum):
    """Outcome of a strip run. The numeric values are part of the API."""

    RTF_OK = 0
    CORRUPTED_RTF = 1
    NO_RTF = 2


@dataclass(frozen=True)
class Diagnostic:
    level: int
    message: str


class DiagnosticReporter(Protocol):
    def report(self, level: int, message: str) -> None: ...


class LoggingReporter:
    """Forwards diagnostics to a standard library logger."""

    def __init__(self, logger_: logging.Logger | None = None):
        self.logger = logger_ or logger

    def report(self, level: int, message: str) -> None:
        self.logger.log(level, message)


class NullReporter:
    def report(self, level: int, message: str) -> None:
        pass


@dataclass
class ParserState:
    reporter: DiagnosticReporter = field(default_factory=LoggingReporter)
    return_code: ReturnCode = ReturnCode.RTF_OK
    is_for_text: bool = True
    charset: CharsetResolver = field(default_factory=CharsetResolver)
    destinations: list[bool] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    # high half of a UTF-16 pair waiting for its low half
    pending_surrogate: int | None = None

    def warning(self, message: str) -> None:
        """Record an anomaly. The status only ever gets worse."""
        if self.return_code == ReturnCode.RTF_OK:
            self.return_code = ReturnCode.CORRUPTED_RTF
        self.warnings.append(Diagnostic(logging.WARNING, message))
        self.reporter.report(logging.WARNING, message)

    def log(self, message: str) -> None:
        self.reporter.report(logging.DEBUG, message)

    def push_destination(self) -> None:
        self.destinations.append(self.is_for_text)

    def pop_destination(self) -> None:
        if not self.destinations:
            self.warning("group closed with an empty destination stack")
            return
        self.is_for_text = self.destinations.pop()

    @property
    def depth(self) -> int:
        return len(self.destinations)
