"""Closed enumerations of the transform protocol.

Every member is a `str` so it can be passed where wire text is expected and
compares equal to the raw value read from the wire.
"""

from __future__ import annotations

from enum import Enum


class MatchingRule(str, Enum):
    """Property merge hint consumed by the client when it resolves entities."""

    STRICT = "strict"
    LOOSE = "loose"


class UIMessageType(str, Enum):
    FATAL = "FatalError"
    PARTIAL_ERROR = "PartialError"
    INFORM = "Inform"
    DEBUG = "Debug"


class BookmarkColor(str, Enum):
    NONE = "-1"
    BLUE = "0"
    GREEN = "1"
    YELLOW = "2"
    ORANGE = "3"
    RED = "4"


class LinkStyle(str, Enum):
    NORMAL = "0"
    DASHED = "1"
    DOTTED = "2"
    DASHDOT = "3"


class LinkDirection(str, Enum):
    OUTPUT_TO_INPUT = "output-to-input"
    INPUT_TO_OUTPUT = "input-to-output"
    BIDIRECTIONAL = "bidirectional"


class LinkProperty(str, Enum):
    """Reserved field names the client maps onto link and node decorations."""

    COLOR = "link#maltego.link.color"
    STYLE = "link#maltego.link.style"
    THICKNESS = "link#maltego.link.thickness"
    LABEL = "link#maltego.link.label"
    DIRECTION = "link#maltego.link.direction"
    BOOKMARK = "bookmark#"
    NOTES = "notes#"


DISPLAY_LABEL_TYPE = "text/html"
DEFAULT_ENTITY_WEIGHT = "100"


def wire_text(value: str | Enum) -> str:
    """Return the wire representation of an enum member or plain string."""

    if isinstance(value, Enum):
        return str(value.value)
    return value
