from __future__ import annotations

from record_checker.core.models import (
    CONFIG_INFO,
    FINE_DETAIL,
    SEVERE,
    LogEvent,
    Severity,
    ValidationError,
    ValidationResult,
    ValidationStatus,
)


def test_severity_total_order() -> None:
    ordered = [
        Severity.TRACE,
        Severity.VERBOSE,
        Severity.DEBUG,
        Severity.CONFIG,
        Severity.INFO,
        Severity.WARNING,
        Severity.ERROR,
    ]
    assert sorted(reversed(ordered)) == ordered
    assert Severity.CONFIG < Severity.INFO
    assert Severity.ERROR >= Severity.WARNING
    assert min(SEVERE) == Severity.WARNING


def test_severity_levelno_follows_rank() -> None:
    by_rank = sorted(Severity, key=lambda s: s.rank)
    assert [s.levelno for s in by_rank] == sorted(s.levelno for s in Severity)


def test_severity_name_width() -> None:
    assert Severity.name_width() == len("WARNING")


def test_buckets_partition_severities() -> None:
    assert FINE_DETAIL | CONFIG_INFO | SEVERE == frozenset(Severity)
    assert not FINE_DETAIL & CONFIG_INFO
    assert not CONFIG_INFO & SEVERE


def test_status_promotion() -> None:
    assert ValidationStatus.NONE.promoted() == ValidationStatus.NONE
    assert ValidationStatus.HAS_ID.promoted() == ValidationStatus.HAS_ID
    assert ValidationStatus.HAS_LOGIN.promoted() == ValidationStatus.HAS_LOGIN
    assert ValidationStatus.HAS_PASSWORD.promoted() == ValidationStatus.OK
    assert ValidationStatus.HAS_INFO.promoted() == ValidationStatus.OK
    assert ValidationStatus.OK.promoted() == ValidationStatus.OK


def test_result_summary_is_error_name() -> None:
    result = ValidationResult(
        status=ValidationStatus.HAS_ID,
        error=ValidationError.LOGIN_MISSING,
        tier=ValidationStatus.HAS_ID,
        first_failure=ValidationError.LOGIN_MISSING,
        event=LogEvent(severity=Severity.WARNING, message="x", component="validator"),
    )
    assert result.summary == "LOGIN_MISSING"
    assert not result.accepted
