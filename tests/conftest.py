"""Shared pytest fixtures and configuration for the projector test suite.

Guidelines
----------
* Core tests must be pure — environment access goes through
  :class:`FakeEnvironment`, never the real process.
* Filesystem tests use ``tmp_path`` only; nothing touches the real
  ``$XDG_CONFIG_HOME``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from projector.exceptions import WorkingDirectoryUnavailableError


class FakeEnvironment:
    """In-memory :class:`~projector.core.protocols.EnvironmentProvider`."""

    def __init__(
        self,
        variables: dict[str, str] | None = None,
        cwd: Path | None = Path("/home/u/work"),
    ) -> None:
        self.variables: dict[str, str] = dict(variables or {})
        self.cwd: Path | None = cwd
        self.cwd_calls: int = 0

    def get_env(self, name: str) -> str | None:
        return self.variables.get(name)

    def current_dir(self) -> Path:
        self.cwd_calls += 1
        if self.cwd is None:
            raise WorkingDirectoryUnavailableError("errored getting current dir")
        return self.cwd


@pytest.fixture()
def fake_env() -> FakeEnvironment:
    """Environment with ``XDG_CONFIG_HOME=/home/u/.config`` and cwd ``/home/u/work``."""
    return FakeEnvironment({"XDG_CONFIG_HOME": "/home/u/.config"})


@pytest.fixture()
def tmp_env(tmp_path: Path) -> FakeEnvironment:
    """Environment rooted in ``tmp_path`` for tests that hit the filesystem."""
    work = tmp_path / "home" / "work"
    work.mkdir(parents=True)
    return FakeEnvironment(
        {"XDG_CONFIG_HOME": str(tmp_path / "config")},
        cwd=work,
    )
