"""Core projector service — directory-scoped lookups and mutations.

The data document maps directory paths to key/value scopes::

    {"projector": {"/home/u/work": {"env": "dev"}, "/home/u": {"env": "prod"}}}

Lookups walk from the working directory up to the filesystem root;
the nearest scope that defines a key wins.  Mutations only ever touch
the working directory's own scope.

Guarantees
----------
* Pure, in-memory — loading and saving belong to the infra layer.
* The caller's document is copied, never mutated in place.
"""

from __future__ import annotations

from typing import Any

from projector.core.models import Config

DATA_ROOT_KEY: str = "projector"


def empty_data() -> dict[str, Any]:
    """Return a fresh, empty data document."""
    return {DATA_ROOT_KEY: {}}


class Projector:
    """Directory-scoped key/value view over a data document.

    Parameters
    ----------
    config:
        The resolved invocation; only ``config.pwd`` is used here.
    data:
        A document shaped like :func:`empty_data`.
    """

    def __init__(self, config: Config, data: dict[str, Any]) -> None:
        self._config: Config = config
        self._scopes: dict[str, dict[str, str]] = {
            str(directory): dict(values)
            for directory, values in data.get(DATA_ROOT_KEY, {}).items()
        }

    @property
    def config(self) -> Config:
        return self._config

    @property
    def data(self) -> dict[str, Any]:
        """The document to persist, detached from internal state."""
        return {
            DATA_ROOT_KEY: {
                directory: dict(values) for directory, values in self._scopes.items()
            },
        }

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _lineage(self) -> list[str]:
        """Working directory followed by each ancestor, nearest first."""
        pwd = self._config.pwd
        return [str(pwd), *(str(parent) for parent in pwd.parents)]

    def get_value_all(self) -> dict[str, str]:
        """Merge every visible scope; nearer directories override farther ones."""
        merged: dict[str, str] = {}
        for directory in reversed(self._lineage()):
            merged.update(self._scopes.get(directory, {}))
        return merged

    def get_value(self, key: str) -> str | None:
        """Return the nearest value for *key*, or ``None``."""
        for directory in self._lineage():
            scope = self._scopes.get(directory)
            if scope is not None and key in scope:
                return scope[key]
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_value(self, key: str, value: str) -> None:
        self._scopes.setdefault(str(self._config.pwd), {})[key] = value

    def remove_value(self, key: str) -> bool:
        """Remove *key* from the working directory's scope only.

        Returns ``True`` when a value was removed.  A scope left empty is
        dropped from the document.
        """
        directory = str(self._config.pwd)
        scope = self._scopes.get(directory)
        if scope is None or key not in scope:
            return False
        del scope[key]
        if not scope:
            del self._scopes[directory]
        return True
