"""Argument classifier — positional tokens to a typed :data:`Operation`.

Dispatch is positional and case-sensitive on the first token:

* ``add <key> <value>`` → :class:`Add`
* ``rm <key>``          → :class:`Remove`
* ``[<key>]``           → :class:`Print`

``add`` and ``rm`` are reserved words: a key literally named ``add`` or
``rm`` cannot be printed through this path.

Guarantees
----------
* Pure — no I/O.
* Only :class:`~projector.exceptions.InvalidArgumentsError` escapes.
"""

from __future__ import annotations

from collections.abc import Sequence

from projector.core.models import Add, Operation, Print, Remove
from projector.exceptions import InvalidArgumentsError

ADD_KEYWORD: str = "add"
REMOVE_KEYWORD: str = "rm"

USAGE: str = "projector [<key>] | projector add <key> <value> | projector rm <key>"


def classify_arguments(args: Sequence[str]) -> Operation:
    """Translate positional CLI arguments into an :data:`Operation`.

    Raises
    ------
    InvalidArgumentsError
        When the argument count does not match the selected operation.
        For ``add`` and ``rm`` the reported count excludes the keyword;
        for an implicit print every token is an argument, so the full
        length is reported.
    """
    if not args:
        return Print()

    term = args[0]

    if term == ADD_KEYWORD:
        if len(args) != 3:
            raise InvalidArgumentsError(
                ADD_KEYWORD, 2, len(args) - 1, hint=f"Usage: {USAGE}",
            )
        return Add(key=args[1], value=args[2])

    if term == REMOVE_KEYWORD:
        if len(args) != 2:
            raise InvalidArgumentsError(
                REMOVE_KEYWORD, 1, len(args) - 1, hint=f"Usage: {USAGE}",
            )
        return Remove(key=args[1])

    if len(args) > 1:
        raise InvalidArgumentsError(
            "print", "0 or 1", len(args), hint=f"Usage: {USAGE}",
        )

    return Print(key=term)
