"""Domain models for projector.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Print:
    """Print one value, or every visible value when *key* is ``None``."""

    key: str | None = None


@dataclass(frozen=True, slots=True)
class Add:
    """Store *value* under *key* for the working directory."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Remove:
    """Delete *key* from the working directory's scope."""

    key: str


Operation = Union[Print, Add, Remove]
"""The user's intent, derived from the positional arguments."""


# ---------------------------------------------------------------------------
# Raw inputs and resolved configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Opts:
    """Raw inputs as handed over by the argument parser."""

    args: tuple[str, ...] = ()
    """Positional arguments, flags already removed."""

    pwd: Path | None = None
    """Explicit working-directory override."""

    config: Path | None = None
    """Explicit data-file override."""


@dataclass(frozen=True, slots=True)
class Config:
    """Fully resolved invocation: operation plus the two paths it acts on."""

    operation: Operation
    pwd: Path
    config: Path
