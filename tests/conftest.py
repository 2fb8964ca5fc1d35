from __future__ import annotations

import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from record_checker.core.config import RouterConfig, default_router_config
from record_checker.core.log_router import LogRouter, initialize


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    return tmp_path / "log"


@pytest.fixture
def router_config(log_dir: Path) -> RouterConfig:
    # One audit logger per test.
    return default_router_config(log_dir, logger_name=f"record_checker.test.{uuid.uuid4().hex}")


@pytest.fixture
def make_router(router_config: RouterConfig) -> Iterator[Callable[..., LogRouter]]:
    created: list[LogRouter] = []

    def _make(config: RouterConfig | None = None) -> LogRouter:
        router = initialize(config or router_config)
        created.append(router)
        return router

    yield _make

    for router in created:
        router.close()


@pytest.fixture
def router(make_router: Callable[..., LogRouter]) -> LogRouter:
    return make_router()


@pytest.fixture
def read_log(log_dir: Path) -> Callable[[str], list[str]]:
    def _read(name: str) -> list[str]:
        path = log_dir / f"{name}.log"
        if not path.exists():
            return []
        lines = path.read_text(encoding="utf-8").split("\n")
        return lines[:-1] if lines and lines[-1] == "" else lines

    return _read


@pytest.fixture
def write_records() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    return _write
