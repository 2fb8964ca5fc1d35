from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from record_checker.core.config import CheckerSettings, default_router_config, resolve_settings
from record_checker.core.driver import RecordCheckDriver
from record_checker.core.errors import LoggingSetupError, RecordSyntaxError
from record_checker.core.log_router import initialize
from record_checker.core.models import Severity
from record_checker.core.sources import select_source
from record_checker.core.validator import RecordValidator

LOGGER = logging.getLogger(__name__)

COMPONENT = "checker"


def _configure_logging() -> None:
    """Configure the diagnostic channel (separate from the audit destinations)."""
    level_name = os.getenv("RECORD_CHECKER_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _non_negative_float(s: str) -> float:
    try:
        value = float(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be a number of seconds") from e
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Validate JSON-lines records and write a severity-routed audit log."
    )
    p.add_argument(
        "input",
        nargs="?",
        default=None,
        help="JSON-lines file (default: input.txt). Reads stdin interactively when it doesn't exist.",
    )
    p.add_argument("--log-dir", default=None, help="Directory for access/checker/error logs (default: log)")
    p.add_argument(
        "--prompt-delay",
        type=_non_negative_float,
        default=None,
        help="Seconds to wait before each interactive prompt (default: 0.15)",
    )
    p.add_argument(
        "--print-results",
        action="store_true",
        help="Print one result code per input line to stdout",
    )
    return p


def _resolve(args: argparse.Namespace) -> CheckerSettings:
    settings = resolve_settings()
    updates: dict[str, object] = {}
    if args.log_dir is not None:
        updates["log_dir"] = args.log_dir
    if args.prompt_delay is not None:
        updates["prompt_delay"] = args.prompt_delay
    if updates:
        settings = CheckerSettings.model_validate({**settings.model_dump(), **updates})
    return settings


def main(argv: Sequence[str] | None = None) -> None:
    _configure_logging()
    args = _build_parser().parse_args(argv)

    try:
        settings = _resolve(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    try:
        router = initialize(default_router_config(settings.log_dir))
    except LoggingSetupError as e:
        LOGGER.error("Logger setup error: %s", e)
        raise SystemExit(1)

    try:
        router.log(Severity.CONFIG, "Logger set up", COMPONENT)

        driver = RecordCheckDriver(RecordValidator(router), router, prompt_delay=settings.prompt_delay)
        kind, location = select_source(args.input if args.input is not None else settings.default_input)
        try:
            results = asyncio.run(driver.run(kind, location))
        except RecordSyntaxError:
            raise SystemExit(1)

        router.log(Severity.INFO, f"Checked {len(results)} records", COMPONENT)
    finally:
        router.close()

    if args.print_results:
        for code in results:
            print(code)


if __name__ == "__main__":
    main()
