"""Severity-routed audit logging.

A router owns one non-propagating stdlib logger with one handler per
destination. Every handler carries an accept-set filter and the shared
``AuditFormatter``, so one event stream is partitioned into independently
leveled files and the console.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

from .config import DestinationConfig, RouterConfig
from .errors import LoggingSetupError
from .models import LogEvent, Severity

LOGGER = logging.getLogger(__name__)

COMPONENT_WIDTH = 12

_ROUTERS: dict[str, LogRouter] = {}


class AcceptFilter(logging.Filter):
    """Pass only records whose level is in the accept-set."""

    def __init__(self, levels: frozenset[Severity]) -> None:
        super().__init__()
        self._levelnos = frozenset(s.levelno for s in levels)

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno in self._levelnos


class AuditFormatter(logging.Formatter):
    """Render ``[timestamp] - SEVERITY - component - message`` with aligned columns."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created)
        stamp = f"[{ts:%d-%m-%Y %H:%M:%S}.{int(record.msecs):03d}]"
        severity = getattr(record, "severity", record.levelname)
        component = getattr(record, "component", record.name)
        return " - ".join(
            [
                stamp,
                severity.rjust(Severity.name_width()),
                component.rjust(COMPONENT_WIDTH),
                record.getMessage(),
            ]
        )


class _ReportingMixin:
    """Report sink write failures on the diagnostic logger and keep going."""

    destination: str = ""

    def handleError(self, record: logging.LogRecord) -> None:
        LOGGER.error("Failed to write to %s destination", self.destination, exc_info=True)


class AuditFileHandler(_ReportingMixin, logging.FileHandler):
    pass


class AuditStreamHandler(_ReportingMixin, logging.StreamHandler):
    pass


def _build_handler(dest: DestinationConfig, log_dir: Path, formatter: logging.Formatter) -> logging.Handler:
    """Open the sink for one destination (raises OSError when it can't)."""
    handler: logging.Handler
    if dest.filename is None:
        handler = AuditStreamHandler(sys.stderr)
    else:
        handler = AuditFileHandler(log_dir / dest.filename, mode="a", encoding="utf-8")
    handler.destination = dest.name
    if dest.levels:
        handler.setLevel(min(dest.levels).levelno)
    handler.addFilter(AcceptFilter(dest.levels))
    handler.setFormatter(formatter)
    return handler


class LogRouter:
    """Handle to an initialized set of audit destinations."""

    def __init__(self, logger: logging.Logger, handlers: dict[str, logging.Handler]) -> None:
        self._logger = logger
        self._handlers = handlers

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def destinations(self) -> list[str]:
        return list(self._handlers)

    def route(self, event: LogEvent) -> None:
        """Deliver the event to every destination accepting its severity."""
        self._logger.log(
            event.severity.levelno,
            event.message,
            extra={"severity": event.severity.value, "component": event.component},
        )

    def log(self, severity: Severity, message: str, component: str) -> None:
        self.route(LogEvent(severity=severity, message=message, component=component))

    def close(self) -> None:
        """Detach and close every sink. Only for process exit and tests."""
        for handler in self._handlers.values():
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers = {}
        if _ROUTERS.get(self.name) is self:
            del _ROUTERS[self.name]


def initialize(config: RouterConfig) -> LogRouter:
    """Open the configured destinations once; later calls return the same router."""
    existing = _ROUTERS.get(config.logger_name)
    if existing is not None:
        LOGGER.debug("Audit router %s already initialized", config.logger_name)
        return existing

    if any(d.filename is not None for d in config.destinations):
        try:
            config.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LoggingSetupError(f"Can't create log dir {config.log_dir}: {exc}") from exc

    formatter = AuditFormatter()
    handlers: dict[str, logging.Handler] = {}
    for dest in config.destinations:
        try:
            handlers[dest.name] = _build_handler(dest, config.log_dir, formatter)
        except OSError as exc:
            if config.strict:
                for handler in handlers.values():
                    handler.close()
                raise LoggingSetupError(f"Can't open {dest.name} destination: {exc}") from exc
            LOGGER.error("Can't open %s destination, skipping it: %s", dest.name, exc)

    if config.destinations and not handlers:
        raise LoggingSetupError("No audit destination could be opened")

    logger = logging.getLogger(config.logger_name)
    logger.setLevel(1)
    logger.propagate = False
    for handler in handlers.values():
        logger.addHandler(handler)

    router = LogRouter(logger, handlers)
    _ROUTERS[config.logger_name] = router
    LOGGER.debug("Audit router %s initialized with %s", config.logger_name, router.destinations)
    return router
