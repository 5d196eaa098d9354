"""Argument parsing for transforms invoked as local processes.

The client calls a local transform as `<program> <value> <key=value#key=value...>`.
Literal `=` and `&` inside values arrive encoded as `\\=` and `&amp;`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "#"
KEY_VALUE_SEPARATOR = "="

_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("\\=", "="),
)


@dataclass
class LocalTransform:
    """Parsed local invocation: the entity value plus its properties."""

    value: str
    values: dict[str, str] = field(default_factory=dict)


def clean_value(value: str) -> str:
    """Undo the client's encoding of separator characters inside a value."""

    out: list[str] = []
    i = 0
    while i < len(value):
        for old, new in _REPLACEMENTS:
            if value.startswith(old, i):
                out.append(new)
                i += len(old)
                break
        else:
            out.append(value[i])
            i += 1
    return "".join(out)


def parse_local_arguments(args: Sequence[str]) -> LocalTransform:
    """Parse local transform arguments.

    `args[0]` is the entity value; every following argument is a
    `#`-separated list of `key=value` chunks. A chunk without `=` is stored
    with an empty value.

    At least two arguments are required; with fewer the process exits, as the
    calling convention cannot be satisfied.
    """

    if len(args) < 2:
        logger.critical("need at least 2 arguments, got %d: %s", len(args), list(args))
        raise SystemExit(1)

    values: dict[str, str] = {}
    for arg in args[1:]:
        arg = arg.replace("\n", " ")
        if not arg:
            continue
        for chunk in arg.split(FIELD_SEPARATOR):
            key, *rest = chunk.split(KEY_VALUE_SEPARATOR)
            values[key] = clean_value(KEY_VALUE_SEPARATOR.join(rest))

    return LocalTransform(value=args[0], values=values)
