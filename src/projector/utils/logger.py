"""Central level-based logger (standard library ``logging``).

Env:
- PROJECTOR_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: WARNING)

Records go to stderr so they never mix with data printed on stdout.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "PROJECTOR_LOG_LEVEL"

_CONFIGURED_FLAG = "_projector_configured"
HANDLER_NAME: str = "projector"


def _level_from_env() -> int:
    raw = (os.getenv(LOG_LEVEL_ENV) or "WARNING").upper().strip()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``projector`` namespace.

    The package logger is configured once (idempotent); the level is
    re-read from the environment on every call.
    """
    level = _level_from_env()
    package_logger = logging.getLogger("projector")
    if not getattr(package_logger, _CONFIGURED_FLAG, False):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"),
        )
        package_logger.addHandler(handler)
        package_logger.propagate = False
        setattr(package_logger, _CONFIGURED_FLAG, True)
    package_logger.setLevel(level)
    return logging.getLogger(name or "projector")
