"""Envelope -> wire text.

Layout rules (the client parser depends on them):
- Compact output, no declaration, elements and attributes in a fixed order.
- Empty elements are written as `<X></X>`; `Value` and `Weight` are always
  present on an entity even when blank.
- Optional parts (genealogy, labels, icon, additional fields) are omitted
  when unset; an empty but set list still renders its container.
- Only the payload held by the envelope is rendered.
"""

from __future__ import annotations

import logging

from core.domain.models import (
    AdditionalField,
    DisplayLabel,
    Entity,
    ExceptionMessage,
    Limits,
    MaltegoMessage,
    RequestMessage,
    ResponseMessage,
    TransformException,
    TransformField,
    UIMessage,
)
from core.wire.escape import cdata, xml_escape

logger = logging.getLogger(__name__)


class _Writer:
    """Append-only text buffer with element helpers."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def open(self, tag: str, attrs: list[tuple[str, str]] | None = None) -> None:
        rendered = "".join(f' {key}="{xml_escape(value)}"' for key, value in attrs or ())
        self.parts.append(f"<{tag}{rendered}>")

    def close(self, tag: str) -> None:
        self.parts.append(f"</{tag}>")

    def text(self, value: str) -> None:
        self.parts.append(xml_escape(value))

    def cdata(self, value: str) -> None:
        self.parts.append(cdata(value))

    def element(self, tag: str, value: str, attrs: list[tuple[str, str]] | None = None) -> None:
        self.open(tag, attrs)
        self.text(value)
        self.close(tag)

    def getvalue(self) -> str:
        return "".join(self.parts)


def _write_field(w: _Writer, field: AdditionalField) -> None:
    w.element(
        "Field",
        field.text,
        [
            ("MatchingRule", field.matching_rule),
            ("Name", field.name),
            ("DisplayName", field.display_name),
        ],
    )


def _write_label(w: _Writer, label: DisplayLabel) -> None:
    w.open("Label", [("Name", label.name), ("Type", label.type)])
    w.cdata(label.text)
    w.close("Label")


def _write_entity(w: _Writer, entity: Entity) -> None:
    w.open("Entity", [("Type", entity.type)])
    if entity.genealogy is not None:
        w.open("Genealogy")
        w.open("Type", [("Name", entity.genealogy.name), ("OldName", entity.genealogy.old_name)])
        w.close("Type")
        w.close("Genealogy")
    w.element("Value", entity.value)
    w.element("Weight", entity.weight)
    if entity.display_info is not None:
        w.open("DisplayInformation")
        for label in entity.display_info:
            _write_label(w, label)
        w.close("DisplayInformation")
    if entity.icon_url:
        w.element("IconURL", entity.icon_url)
    if entity.fields is not None:
        w.open("AdditionalFields")
        for field in entity.fields:
            _write_field(w, field)
        w.close("AdditionalFields")
    w.close("Entity")


def _write_entities(w: _Writer, entities: list[Entity]) -> None:
    w.open("Entities")
    for entity in entities:
        _write_entity(w, entity)
    w.close("Entities")


def _write_ui_message(w: _Writer, message: UIMessage) -> None:
    w.element("UIMessage", message.text, [("MessageType", message.message_type)])


def _write_exception(w: _Writer, exception: TransformException) -> None:
    w.element("Exception", exception.text, [("code", exception.code)])


def _write_limits(w: _Writer, limits: Limits) -> None:
    w.open("Limits", [("HardLimit", limits.hard_limit), ("SoftLimit", limits.soft_limit)])
    w.close("Limits")


def _write_transform_field(w: _Writer, field: TransformField) -> None:
    w.element("Field", field.text, [("Name", field.name)])


def _write_response(w: _Writer, response: ResponseMessage) -> None:
    w.open("MaltegoTransformResponseMessage")
    _write_entities(w, response.entities)
    w.open("UIMessages")
    for message in response.ui_messages:
        _write_ui_message(w, message)
    w.close("UIMessages")
    w.close("MaltegoTransformResponseMessage")


def _write_exception_message(w: _Writer, payload: ExceptionMessage) -> None:
    w.open("MaltegoTransformExceptionMessage")
    w.open("Exceptions")
    for exception in payload.exceptions:
        _write_exception(w, exception)
    w.close("Exceptions")
    w.close("MaltegoTransformExceptionMessage")


def _write_request(w: _Writer, request: RequestMessage) -> None:
    w.open("MaltegoTransformRequestMessage")
    _write_entities(w, request.entities)
    _write_limits(w, request.limits)
    w.open("TransformFields")
    for field in request.transform_fields:
        _write_transform_field(w, field)
    w.close("TransformFields")
    w.close("MaltegoTransformRequestMessage")


def _write_message(w: _Writer, message: MaltegoMessage) -> None:
    w.open("MaltegoMessage")
    payload = message.payload
    if isinstance(payload, ResponseMessage):
        _write_response(w, payload)
    elif isinstance(payload, ExceptionMessage):
        _write_exception_message(w, payload)
    elif isinstance(payload, RequestMessage):
        _write_request(w, payload)
    w.close("MaltegoMessage")


def encode_entity(entity: Entity) -> str:
    """Encode a single `Entity` element (useful for fixtures and debugging)."""

    w = _Writer()
    _write_entity(w, entity)
    return w.getvalue()


def render(message: MaltegoMessage) -> str:
    """Marshal the envelope.

    Never raises: on failure the error is logged and the text produced so far
    is returned, since the protocol has no other channel to report it.
    """

    w = _Writer()
    try:
        _write_message(w, message)
    except Exception:
        logger.exception("Failed to marshal message")
    return w.getvalue()


def render_as_exception(message: MaltegoMessage) -> str:
    """Drop any staged response content and marshal the envelope."""

    message.clear_response()
    return render(message)
