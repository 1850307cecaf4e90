"""CLI application entry point and command routing for projector.

This module is the **sole error boundary** for the entire application.
It catches :class:`~projector.exceptions.ProjectorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — classification and path resolution
  belong to ``core``, persistence to ``infra``.
* Data goes to stdout through :data:`~projector.cli.console.output`;
  diagnostics go to stderr through :data:`~projector.cli.console.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from projector.cli import exit_codes
from projector.cli.console import console, escape, output
from projector.core.config_resolver import build_config
from projector.core.models import Add, Config, Opts, Print, Remove
from projector.core.projector import Projector
from projector.core.protocols import EnvironmentProvider
from projector.exceptions import ProjectorError, iter_causes
from projector.infra.json_store import JsonStore
from projector.infra.system_environment import SystemEnvironment
from projector.utils.logger import get_logger
from projector.version import __version__

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Operations are positional words rather than sub-commands, because a
    bare key (``projector <key>``) must also be accepted:

    * ``projector``                   — print every visible value
    * ``projector <key>``             — print one value
    * ``projector add <key> <value>`` — store a value for the directory
    * ``projector rm <key>``          — remove a value from the directory
    """
    parser = argparse.ArgumentParser(
        prog="projector",
        description="Directory-scoped key/value store.",
        epilog=(
            "Values that start with '-' must follow '--', "
            "e.g. projector -- add key -value."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-p",
        "--pwd",
        type=Path,
        default=None,
        help="Directory to act on (defaults to the current directory).",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Data file (defaults to $XDG_CONFIG_HOME/projector/projector.json).",
    )
    parser.add_argument(
        "args",
        nargs="*",
        default=[],
        help="Operation and its arguments: [<key>] | add <key> <value> | rm <key>.",
    )
    return parser


# ---------------------------------------------------------------------------
# Operation dispatch
# ---------------------------------------------------------------------------

def _run(config: Config) -> int:
    """Execute the resolved operation against the data file."""
    store = JsonStore(config.config)
    projector = Projector(config, store.load())
    operation = config.operation

    if isinstance(operation, Print):
        if operation.key is None:
            output.print(json.dumps(projector.get_value_all()))
        else:
            value = projector.get_value(operation.key)
            if value is not None:
                output.print(value)
        return exit_codes.SUCCESS

    if isinstance(operation, Add):
        projector.set_value(operation.key, operation.value)
        store.save(projector.data)
        return exit_codes.SUCCESS

    if isinstance(operation, Remove):
        if not projector.remove_value(operation.key):
            logger.info("nothing to remove for %r in %s", operation.key, config.pwd)
        store.save(projector.data)
        return exit_codes.SUCCESS

    raise AssertionError(f"unhandled operation: {operation!r}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    env: EnvironmentProvider | None = None,
) -> int:
    """Run the projector CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    env:
        Environment provider used for path defaults.  When ``None``, the
        real process environment is used.  Accepting both enables
        deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    opts = Opts(args=tuple(args.args), pwd=args.pwd, config=args.config)
    config = build_config(opts, env if env is not None else SystemEnvironment())
    return _run(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_error(exc: ProjectorError) -> None:
    """Render *exc*, its chain of causes, and its hint to stderr."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    for cause in iter_causes(exc):
        detail = str(cause) or type(cause).__name__
        console.print(f"  [dim]Caused by:[/dim] {escape(detail)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ProjectorError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
