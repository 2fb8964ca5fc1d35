"""Core data models for record checking and audit routing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Audit severity levels, used both for formatting and for routing."""

    TRACE = "TRACE"
    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"
    CONFIG = "CONFIG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @property
    def levelno(self) -> int:
        """Numeric level understood by the stdlib logging machinery."""
        return _SEVERITY_LEVELNO[self]

    @classmethod
    def name_width(cls) -> int:
        return max(len(s.value) for s in cls)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.TRACE: 0,
    Severity.VERBOSE: 1,
    Severity.DEBUG: 2,
    Severity.CONFIG: 3,
    Severity.INFO: 4,
    Severity.WARNING: 5,
    Severity.ERROR: 6,
}

_SEVERITY_LEVELNO: dict[Severity, int] = {
    Severity.TRACE: 5,
    Severity.VERBOSE: 7,
    Severity.DEBUG: 10,
    Severity.CONFIG: 15,
    Severity.INFO: 20,
    Severity.WARNING: 30,
    Severity.ERROR: 40,
}

# Destination buckets
FINE_DETAIL: frozenset[Severity] = frozenset({Severity.TRACE, Severity.VERBOSE, Severity.DEBUG})
CONFIG_INFO: frozenset[Severity] = frozenset({Severity.CONFIG, Severity.INFO})
SEVERE: frozenset[Severity] = frozenset({Severity.WARNING, Severity.ERROR})

ACCEPTED_SEVERITY = Severity.DEBUG
REJECTED_SEVERITY = Severity.WARNING


class ValidationStatus(str, Enum):
    """Highest check-chain tier a record satisfies (NONE worst, OK best)."""

    NONE = "NONE"
    HAS_ID = "HAS_ID"
    HAS_LOGIN = "HAS_LOGIN"
    HAS_PASSWORD = "HAS_PASSWORD"
    HAS_INFO = "HAS_INFO"
    OK = "OK"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]

    def promoted(self) -> ValidationStatus:
        """Password presence is enough for acceptance."""
        if self.rank >= ValidationStatus.HAS_PASSWORD.rank:
            return ValidationStatus.OK
        return self


_STATUS_RANK: dict[ValidationStatus, int] = {
    ValidationStatus.NONE: 0,
    ValidationStatus.HAS_ID: 1,
    ValidationStatus.HAS_LOGIN: 2,
    ValidationStatus.HAS_PASSWORD: 3,
    ValidationStatus.HAS_INFO: 4,
    ValidationStatus.OK: 5,
}


class ValidationError(str, Enum):
    """First failing check of the chain (NONE when the record is accepted)."""

    NONE = "NONE"
    ID_MISSING = "ID_MISSING"
    ID_NOT_INTEGER = "ID_NOT_INTEGER"
    LOGIN_MISSING = "LOGIN_MISSING"
    LOGIN_NOT_STRING = "LOGIN_NOT_STRING"
    PASSWORD_MISSING = "PASSWORD_MISSING"
    PASSWORD_NOT_STRING = "PASSWORD_NOT_STRING"
    INFO_MISSING = "INFO_MISSING"
    INFO_NOT_ARRAY = "INFO_NOT_ARRAY"


@dataclass(frozen=True, slots=True)
class LogEvent:
    """One audit event, produced and routed immediately."""

    severity: Severity
    message: str
    component: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of checking a single record."""

    status: ValidationStatus
    error: ValidationError
    tier: ValidationStatus  # tier reached before promotion
    first_failure: ValidationError  # survives promotion, diagnostic only
    event: LogEvent

    @property
    def accepted(self) -> bool:
        return self.status == ValidationStatus.OK

    @property
    def summary(self) -> str:
        return self.error.value
