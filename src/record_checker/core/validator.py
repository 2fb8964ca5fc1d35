"""Record validation state machine.

The check chain is a fixed, ordered tuple of field checks. It runs once per
record and halts at the first failure:

    id (integer) -> login (string) -> password (string) -> info (array)

The tier reached becomes the status; anything at HAS_PASSWORD or better is
promoted to OK.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import RecordSyntaxError
from .log_router import LogRouter
from .models import (
    ACCEPTED_SEVERITY,
    REJECTED_SEVERITY,
    LogEvent,
    Severity,
    ValidationError,
    ValidationResult,
    ValidationStatus,
)

COMPONENT = "validator"


def _is_integer(value: Any) -> bool:
    # json decodes fractional and exponent literals to float; bool is not numeric in JSON.
    return isinstance(value, int) and not isinstance(value, bool)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_array(value: Any) -> bool:
    return isinstance(value, list)


@dataclass(frozen=True, slots=True)
class FieldCheck:
    field: str
    tier: ValidationStatus
    missing: ValidationError
    wrong_type: ValidationError
    predicate: Callable[[Any], bool]

    def run(self, record: Mapping[str, Any]) -> CheckPassed | CheckFailed:
        if self.field not in record:
            return CheckFailed(self.missing)
        if not self.predicate(record[self.field]):
            return CheckFailed(self.wrong_type)
        return CheckPassed(self.tier)


@dataclass(frozen=True, slots=True)
class CheckPassed:
    tier: ValidationStatus


@dataclass(frozen=True, slots=True)
class CheckFailed:
    error: ValidationError


CHECK_CHAIN: tuple[FieldCheck, ...] = (
    FieldCheck(
        "id",
        ValidationStatus.HAS_ID,
        ValidationError.ID_MISSING,
        ValidationError.ID_NOT_INTEGER,
        _is_integer,
    ),
    FieldCheck(
        "login",
        ValidationStatus.HAS_LOGIN,
        ValidationError.LOGIN_MISSING,
        ValidationError.LOGIN_NOT_STRING,
        _is_string,
    ),
    FieldCheck(
        "password",
        ValidationStatus.HAS_PASSWORD,
        ValidationError.PASSWORD_MISSING,
        ValidationError.PASSWORD_NOT_STRING,
        _is_string,
    ),
    FieldCheck(
        "info",
        ValidationStatus.HAS_INFO,
        ValidationError.INFO_MISSING,
        ValidationError.INFO_NOT_ARRAY,
        _is_array,
    ),
)


def run_check_chain(
    record: Mapping[str, Any],
    chain: tuple[FieldCheck, ...] = CHECK_CHAIN,
) -> tuple[ValidationStatus, ValidationError]:
    """Return the tier reached and the first failing check (NONE if all pass)."""
    tier = ValidationStatus.NONE
    for check in chain:
        outcome = check.run(record)
        if isinstance(outcome, CheckFailed):
            return tier, outcome.error
        tier = outcome.tier
    return tier, ValidationError.NONE


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def parse_record(raw_line: str) -> Any:
    """Decode one line; a blank line decodes to None."""
    if not raw_line.strip():
        return None
    try:
        return json.loads(raw_line, parse_constant=_reject_constant)
    except ValueError as exc:
        # JSONDecodeError is a ValueError subclass.
        raise RecordSyntaxError(raw_line, str(exc)) from exc


class RecordValidator:
    """Check records one at a time and describe the outcome as a LogEvent."""

    def __init__(self, router: LogRouter) -> None:
        self._router = router

    def validate(self, raw_line: str) -> ValidationResult:
        """Validate one raw line.

        Raises
        ------
        RecordSyntaxError
            When the line is not JSON at all. The cause and the line are
            routed at ERROR first.
        """
        try:
            value = parse_record(raw_line)
        except RecordSyntaxError as exc:
            self._router.log(Severity.ERROR, str(exc), COMPONENT)
            self._router.log(Severity.ERROR, raw_line, COMPONENT)
            raise

        if not isinstance(value, dict):
            return ValidationResult(
                status=ValidationStatus.NONE,
                error=ValidationError.NONE,
                tier=ValidationStatus.NONE,
                first_failure=ValidationError.NONE,
                event=LogEvent(
                    severity=Severity.WARNING,
                    message=f"Record is not a JSON object: {raw_line}",
                    component=COMPONENT,
                ),
            )

        tier, first_failure = run_check_chain(value)
        status = tier.promoted()
        error = ValidationError.NONE if status == ValidationStatus.OK else first_failure

        if status == ValidationStatus.OK:
            event = LogEvent(severity=ACCEPTED_SEVERITY, message=raw_line, component=COMPONENT)
        else:
            event = LogEvent(
                severity=REJECTED_SEVERITY,
                message=f"{raw_line} - {error.value}",
                component=COMPONENT,
            )

        return ValidationResult(
            status=status,
            error=error,
            tier=tier,
            first_failure=first_failure,
            event=event,
        )
