"""Custom exception hierarchy for projector.

All exceptions that cross layer boundaries must inherit from
:class:`ProjectorError`.  Raw ``OSError`` / ``json`` exceptions must
NEVER propagate beyond the infrastructure layer — they are caught and
re-raised (``raise ... from exc``) as a typed subclass defined here, so
the original cause stays attached for the CLI to render.

Hierarchy
---------
ProjectorError
├── InvalidArgumentsError
├── EnvironmentLookupError
├── WorkingDirectoryUnavailableError
├── StoreError
└── MissingDependencyError
"""

from __future__ import annotations


class ProjectorError(Exception):
    """Base exception for all projector errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument classification -----------------------------------------------

class InvalidArgumentsError(ProjectorError):
    """Raised when positional arguments do not match any operation's arity."""

    def __init__(
        self,
        operation: str,
        expected: int | str,
        actual: int,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"invalid arguments for {operation}: expected {expected}, got {actual}",
            hint=hint,
        )
        self.operation: str = operation
        self.expected: int | str = expected
        self.actual: int = actual


# --- Path resolution -------------------------------------------------------

class EnvironmentLookupError(ProjectorError):
    """Raised when a required environment variable is missing."""

    def __init__(self, variable: str, *, hint: str | None = None) -> None:
        super().__init__(f"unable to get {variable}", hint=hint)
        self.variable: str = variable


class WorkingDirectoryUnavailableError(ProjectorError):
    """Raised when the process cannot determine its current directory."""


# --- Persistence -----------------------------------------------------------

class StoreError(ProjectorError):
    """Raised when the data file cannot be read, parsed or written."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(ProjectorError):
    """Raised when an optional runtime dependency is not installed."""


def iter_causes(exc: BaseException) -> list[BaseException]:
    """Return the explicit ``__cause__`` chain of *exc*, nearest first.

    *exc* itself is not included.  Stops at a cycle, since
    ``__cause__`` can be reassigned by arbitrary code.
    """
    causes: list[BaseException] = []
    seen: set[int] = {id(exc)}
    current = exc.__cause__
    while current is not None and id(current) not in seen:
        causes.append(current)
        seen.add(id(current))
        current = current.__cause__
    return causes
