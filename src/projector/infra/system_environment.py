"""OS-backed implementation of :class:`~projector.core.protocols.EnvironmentProvider`.

This module is the **only** place in the codebase that reads
``os.environ`` or calls ``os.getcwd()`` on behalf of the core.
``OSError`` is caught here and re-raised as
:class:`~projector.exceptions.WorkingDirectoryUnavailableError`.
"""

from __future__ import annotations

import os
from pathlib import Path

from projector.exceptions import WorkingDirectoryUnavailableError


class SystemEnvironment:
    """Concrete :class:`EnvironmentProvider` for the running process.

    Satisfies the protocol structurally — no explicit inheritance
    required.
    """

    def get_env(self, name: str) -> str | None:
        return os.environ.get(name)

    def current_dir(self) -> Path:
        """Return the current working directory.

        Raises
        ------
        WorkingDirectoryUnavailableError
            When ``os.getcwd()`` fails, typically because the directory
            was removed after the process started.
        """
        try:
            return Path(os.getcwd())
        except OSError as exc:
            raise WorkingDirectoryUnavailableError(
                "errored getting current dir",
                hint="Change to an existing directory or pass --pwd <path>.",
            ) from exc
