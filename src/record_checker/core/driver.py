"""Drive records from a source through the validator into the audit log."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from pathlib import Path

from .config import DEFAULT_PROMPT_DELAY
from .log_router import LogRouter
from .sources import SourceKind, iter_interactive, read_record_file
from .validator import RecordValidator


async def _aiter(lines: Iterable[str]) -> AsyncIterator[str]:
    for line in lines:
        yield line


class RecordCheckDriver:
    """Validate lines in input order and collect one error name per line."""

    def __init__(
        self,
        validator: RecordValidator,
        router: LogRouter,
        *,
        prompt_delay: float = DEFAULT_PROMPT_DELAY,
    ) -> None:
        self._validator = validator
        self._router = router
        self._prompt_delay = prompt_delay
        self._results: list[str] = []

    @property
    def results(self) -> list[str]:
        return list(self._results)

    def check_line(self, line: str) -> str:
        """Validate and route one line; RecordSyntaxError propagates."""
        result = self._validator.validate(line)
        self._router.route(result.event)
        return result.summary

    async def run(self, kind: SourceKind, location: str | Path | None = None) -> list[str]:
        """Check every line of the source and return the error names."""
        self._results = []
        if kind == SourceKind.FILE:
            if location is None:
                raise ValueError("a file source needs a location")
            lines = _aiter(await read_record_file(location, self._router))
        else:
            lines = iter_interactive(self._router, delay=self._prompt_delay)

        async for line in lines:
            self._results.append(self.check_line(line))
        return self.results
