"""Record sources: a JSON-lines file or an interactive prompt."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator
from enum import Enum
from pathlib import Path
from typing import TextIO

import aiofiles

from .config import DEFAULT_PROMPT_DELAY
from .log_router import LogRouter
from .models import Severity

COMPONENT = "source"
PROMPT = "Input: "


class SourceKind(str, Enum):
    FILE = "file"
    INTERACTIVE = "interactive"


def select_source(path: str | Path | None) -> tuple[SourceKind, Path | None]:
    """Use the file when it exists, otherwise read interactively from stdin."""
    if path is not None:
        p = Path(path)
        if p.exists():
            return SourceKind.FILE, p
    return SourceKind.INTERACTIVE, None


async def read_record_file(path: str | Path, router: LogRouter, *, encoding: str = "utf-8") -> list[str]:
    """Read every line of the file into memory, in order.

    A file that can't be read yields no records; it is reported as a warning
    and never falls back to interactive mode.
    """
    p = Path(path)
    router.log(Severity.INFO, f"Read from {p}", COMPONENT)
    try:
        async with aiofiles.open(p, encoding=encoding) as f:
            content = await f.read()
    except (OSError, UnicodeDecodeError) as exc:
        router.log(Severity.WARNING, f"Can't read input file {p}: {exc}", COMPONENT)
        return []
    # Split on newlines only; U+2028 and friends may appear inside JSON strings.
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


async def iter_interactive(
    router: LogRouter,
    *,
    stream: TextIO | None = None,
    prompt_stream: TextIO | None = None,
    delay: float = DEFAULT_PROMPT_DELAY,
) -> AsyncIterator[str]:
    """Prompt for and yield lines until the input stream ends."""
    stream = stream or sys.stdin
    prompt_stream = prompt_stream or sys.stdout
    router.log(Severity.INFO, "Read from stdin", COMPONENT)
    while True:
        # Pacing delay before each prompt.
        await asyncio.sleep(delay)
        prompt_stream.write(PROMPT)
        prompt_stream.flush()
        line = await asyncio.to_thread(stream.readline)
        if line == "":
            return
        yield line.rstrip("\r\n")
