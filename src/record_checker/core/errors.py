"""Process-terminating error types."""

from __future__ import annotations


class RecordCheckerError(Exception):
    """Base class for fatal checker errors."""


class LoggingSetupError(RecordCheckerError):
    """The audit logging subsystem could not be created."""


class RecordSyntaxError(RecordCheckerError):
    """An input line is not syntactically valid JSON."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Record isn't in JSON format: {reason}")
        self.line = line
        self.reason = reason
