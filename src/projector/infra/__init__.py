"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: environment
variables, the current directory, and the JSON data file.  Every raw
``OSError`` / ``json`` exception is caught here and re-raised as a
:class:`~projector.exceptions.ProjectorError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from projector.infra.json_store import JsonStore
from projector.infra.system_environment import SystemEnvironment

__all__: list[str] = [
    "JsonStore",
    "SystemEnvironment",
]
