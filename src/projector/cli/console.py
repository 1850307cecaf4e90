"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) remain functional even when Rich is not
installed.

Two proxies are exposed:

* :data:`console` — styled diagnostics on stderr.
* :data:`output` — raw data on stdout through plain ``print``, so stored
  values (tabs, control characters) reach other tools unchanged.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from projector.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; returned unchanged when Rich is absent."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


_MARKUP_TAG = re.compile(r"\[/?[a-z#@][^\[\]]*\]")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy for stderr with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print without tags."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*(_strip_markup(obj) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


class _PlainOutput:
	"""Data writer for stdout; values are emitted byte-for-byte, never styled."""

	def print(self, *objects: object) -> None:
		print(*objects, file=sys.stdout)


def _strip_markup(obj: object) -> object:
	return _MARKUP_TAG.sub("", obj) if isinstance(obj, str) else obj


console = _ConsoleProxy()
output = _PlainOutput()
