"""Shared pytest fixtures and configuration for the rojo-cli test suite.

Guidelines
----------
* The real command library is never imported; ``FakeCommandLibrary``
  stands in for it at the protocol boundary.
* Tests must not depend on the real working directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


class FakeCommandLibrary:
    """Records every call; raises ``error`` instead when one is set."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, object]] = []
        self.error = error

    def _record(self, name: str, options: object) -> None:
        self.calls.append((name, options))
        if self.error is not None:
            raise self.error

    def init(self, options: object) -> None:
        self._record("init", options)

    def serve(self, options: object) -> None:
        self._record("serve", options)

    def build(self, options: object) -> None:
        self._record("build", options)

    def upload(self, options: object) -> None:
        self._record("upload", options)


@pytest.fixture
def commands() -> FakeCommandLibrary:
    return FakeCommandLibrary()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside a fresh temporary directory."""
    monkeypatch.chdir(tmp_path)
    return Path.cwd()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    package_logger = logging.getLogger("rojo_cli")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
