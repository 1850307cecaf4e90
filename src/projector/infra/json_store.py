"""Infrastructure: JSON persistence of the projector data document.

Rules
-----
* A missing file is not an error — it reads as an empty document.
* Corrupt or unreadable files are reported, never silently replaced.
* ``OSError`` and ``json.JSONDecodeError`` are mapped to
  :class:`~projector.exceptions.StoreError` here.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from projector.core.projector import DATA_ROOT_KEY, empty_data
from projector.exceptions import StoreError
from projector.utils.logger import get_logger

logger = get_logger(__name__)


class JsonStore:
    """Load and save the data document at *path*."""

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """Read the document, or return an empty one if the file is absent.

        Raises
        ------
        StoreError
            When the file cannot be read, is not valid JSON, or lacks a
            ``"projector"`` object at the top level.
        """
        if not self._path.exists():
            logger.debug("no data file at %s, starting empty", self._path)
            return empty_data()

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(
                f"unable to read {self._path}",
                hint="Check the file permissions or pass --config <path>.",
            ) from exc

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreError(
                f"unable to parse {self._path}",
                hint="Fix or remove the file; it must contain a JSON object.",
            ) from exc

        if not isinstance(data, dict) or not isinstance(data.get(DATA_ROOT_KEY), dict):
            raise StoreError(
                f"unexpected document structure in {self._path}",
                hint=f'Expected an object like {{"{DATA_ROOT_KEY}": {{}}}}.',
            )

        for directory, scope in data[DATA_ROOT_KEY].items():
            if not isinstance(scope, dict) or not all(
                isinstance(value, str) for value in scope.values()
            ):
                raise StoreError(
                    f"unexpected entry for {directory!r} in {self._path}",
                    hint='Each directory must map to an object of strings, e.g. {"key": "value"}.',
                )

        logger.debug("loaded %d scope(s) from %s", len(data[DATA_ROOT_KEY]), self._path)
        return data

    def save(self, data: dict[str, Any]) -> None:
        """Write *data*, creating parent directories as needed.

        Raises
        ------
        StoreError
            When the directory or file cannot be written.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as exc:
            raise StoreError(
                f"unable to write {self._path}",
                hint="Check the directory permissions or pass --config <path>.",
            ) from exc
        logger.debug("saved data to %s", self._path)
