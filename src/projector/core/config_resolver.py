"""Path resolver — builds the immutable :class:`Config` for one invocation.

Explicit overrides always win and are returned untouched (no existence
check, no normalisation).  Defaults come from the injected
:class:`~projector.core.protocols.EnvironmentProvider`:

* data file  → ``$XDG_CONFIG_HOME/projector/projector.json``
* working dir → the process's current directory

Guarantees
----------
* No filesystem access — paths are computed, never checked or created.
* Only :class:`~projector.exceptions.ProjectorError` subclasses escape.
"""

from __future__ import annotations

from pathlib import Path

from projector.core.models import Config, Opts
from projector.core.operation import classify_arguments
from projector.core.protocols import EnvironmentProvider
from projector.exceptions import EnvironmentLookupError
from projector.utils.logger import get_logger

CONFIG_HOME_ENV: str = "XDG_CONFIG_HOME"
APP_DIR_NAME: str = "projector"
CONFIG_FILE_NAME: str = "projector.json"

logger = get_logger(__name__)


def resolve_config_path(config: Path | None, env: EnvironmentProvider) -> Path:
    """Return the data-file path, deriving it from the environment if needed.

    Raises
    ------
    EnvironmentLookupError
        When no explicit path is given and ``XDG_CONFIG_HOME`` is unset
        or empty.
    """
    if config is not None:
        return config

    base = env.get_env(CONFIG_HOME_ENV)
    if not base:
        raise EnvironmentLookupError(
            CONFIG_HOME_ENV,
            hint=f"Set {CONFIG_HOME_ENV} or pass --config <path>.",
        )

    path = Path(base) / APP_DIR_NAME / CONFIG_FILE_NAME
    logger.debug("derived config path %s from %s", path, CONFIG_HOME_ENV)
    return path


def resolve_pwd(pwd: Path | None, env: EnvironmentProvider) -> Path:
    """Return the working directory, asking the environment if needed.

    Raises
    ------
    WorkingDirectoryUnavailableError
        Propagated from the provider when the current directory is gone.
    """
    if pwd is not None:
        return pwd
    return env.current_dir()


def build_config(opts: Opts, env: EnvironmentProvider) -> Config:
    """Classify the arguments and resolve both paths into a :class:`Config`."""
    operation = classify_arguments(opts.args)
    config = resolve_config_path(opts.config, env)
    pwd = resolve_pwd(opts.pwd, env)
    logger.debug("resolved %r in %s using %s", operation, pwd, config)
    return Config(operation=operation, pwd=pwd, config=config)
