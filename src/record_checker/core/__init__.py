"""Record validation, audit routing and the driver that wires them together."""

from __future__ import annotations

from .config import CheckerSettings, DestinationConfig, RouterConfig, default_router_config, resolve_settings
from .driver import RecordCheckDriver
from .errors import LoggingSetupError, RecordCheckerError, RecordSyntaxError
from .log_router import AuditFormatter, LogRouter, initialize
from .models import LogEvent, Severity, ValidationError, ValidationResult, ValidationStatus
from .sources import SourceKind, select_source
from .validator import RecordValidator

__all__ = [
    "AuditFormatter",
    "CheckerSettings",
    "DestinationConfig",
    "LogEvent",
    "LogRouter",
    "LoggingSetupError",
    "RecordCheckDriver",
    "RecordCheckerError",
    "RecordSyntaxError",
    "RecordValidator",
    "RouterConfig",
    "Severity",
    "SourceKind",
    "ValidationError",
    "ValidationResult",
    "ValidationStatus",
    "default_router_config",
    "initialize",
    "resolve_settings",
    "select_source",
]
