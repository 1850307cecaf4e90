"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O; environment access only through
  :class:`~projector.core.protocols.EnvironmentProvider`.
* No imports from ``cli`` or ``infra``.
"""

from projector.core.config_resolver import build_config, resolve_config_path, resolve_pwd
from projector.core.models import Add, Config, Operation, Opts, Print, Remove
from projector.core.operation import classify_arguments
from projector.core.projector import Projector, empty_data
from projector.core.protocols import EnvironmentProvider

__all__: list[str] = [
    "Add",
    "Config",
    "EnvironmentProvider",
    "Operation",
    "Opts",
    "Print",
    "Projector",
    "Remove",
    "build_config",
    "classify_arguments",
    "empty_data",
    "resolve_config_path",
    "resolve_pwd",
]
