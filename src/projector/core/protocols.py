"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so path resolution stays testable without touching
real process state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class EnvironmentProvider(Protocol):
    """Contract for reading process environment and working directory.

    Any object that implements both methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def get_env(self, name: str) -> str | None:
        """Return the value of environment variable *name*, or ``None``."""
        ...  # pragma: no cover

    def current_dir(self) -> Path:
        """Return the process's current working directory.

        Raises
        ------
        WorkingDirectoryUnavailableError
            When the directory cannot be determined (e.g. it was
            deleted after the process started).
        """
        ...  # pragma: no cover
