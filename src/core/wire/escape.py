"""Text escaping for the transform protocol."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_ESCAPES: dict[str, str] = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}

_NEWLINE_ENTITY = "&#xA;"
_REPLACEMENT_CHAR = "\ufffd"


def _in_character_range(ch: str) -> bool:
    code = ord(ch)
    return (
        code in (0x09, 0x0A, 0x0D)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def xml_escape(text: str) -> str:
    """Escape `text` for attribute values and character data.

    Same table as the reference marshaller: quotes become numeric entities,
    TAB/LF/CR are escaped and characters outside the XML range are replaced
    with U+FFFD.
    """

    out: list[str] = []
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif _in_character_range(ch):
            out.append(ch)
        else:
            out.append(_REPLACEMENT_CHAR)
    return "".join(out)


def cdata(text: str) -> str:
    """Wrap `text` in a CDATA section, splitting any embedded `]]>`.

    Empty text produces no section at all.
    """

    if not text:
        return ""
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def escape(text: str | bytes) -> str:
    """Make `text` safe to embed in a message and restore literal newlines.

    The newline pass runs after escaping and is not configurable: the client
    displays multi-line values only when the newline is literal inside the
    escaped block.

    Failures are logged and yield an empty string.
    """

    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Cannot escape non UTF-8 text: %s", exc)
            return ""
    if not isinstance(text, str):
        logger.warning("Cannot escape value of type %s", type(text).__name__)
        return ""

    return xml_escape(text).replace(_NEWLINE_ENTITY, "\n")
