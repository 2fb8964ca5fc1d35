"""Checker settings and audit destination configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .models import CONFIG_INFO, FINE_DETAIL, SEVERE, Severity

DEFAULT_LOG_DIR = Path("log")
DEFAULT_INPUT_FILE = Path("input.txt")
DEFAULT_PROMPT_DELAY = 0.15
AUDIT_LOGGER_NAME = "record_checker.audit"


class DestinationConfig(BaseModel):
    """One audit destination: accept-set plus sink."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Destination label (access, checker, ...).")
    levels: frozenset[Severity] = Field(description="Severities this destination accepts.")
    filename: str | None = Field(
        default=None, description="Append-only file under the log dir; None means console."
    )


class RouterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_dir: Path = DEFAULT_LOG_DIR
    destinations: tuple[DestinationConfig, ...] = ()
    logger_name: str = AUDIT_LOGGER_NAME
    # When False, a file sink that cannot be opened is skipped instead of aborting setup.
    strict: bool = True


class CheckerSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_dir: Path = DEFAULT_LOG_DIR
    default_input: Path = DEFAULT_INPUT_FILE
    prompt_delay: float = Field(default=DEFAULT_PROMPT_DELAY, ge=0.0)


def default_router_config(
    log_dir: str | Path = DEFAULT_LOG_DIR,
    *,
    logger_name: str = AUDIT_LOGGER_NAME,
) -> RouterConfig:
    """The four fixed destinations: access, checker, error and console."""
    return RouterConfig(
        log_dir=Path(log_dir),
        logger_name=logger_name,
        destinations=(
            DestinationConfig(name="access", levels=FINE_DETAIL, filename="access.log"),
            DestinationConfig(name="checker", levels=CONFIG_INFO, filename="checker.log"),
            DestinationConfig(name="error", levels=SEVERE, filename="error.log"),
            DestinationConfig(name="console", levels=SEVERE),
        ),
    )


def resolve_settings(settings: CheckerSettings | None = None) -> CheckerSettings:
    """Return settings with optional env overrides applied."""
    if settings is None:
        settings = CheckerSettings()

    updates: dict[str, object] = {}

    log_dir = os.getenv("RECORD_CHECKER_LOG_DIR")
    if log_dir:
        updates["log_dir"] = Path(log_dir)

    delay = os.getenv("RECORD_CHECKER_PROMPT_DELAY")
    if delay:
        try:
            value = float(delay)
        except ValueError as exc:
            raise ValueError("RECORD_CHECKER_PROMPT_DELAY must be a number") from exc
        if value < 0:
            raise ValueError("RECORD_CHECKER_PROMPT_DELAY must be >= 0")
        updates["prompt_delay"] = value

    if not updates:
        return settings
    return settings.model_copy(update=updates)
