"""Wire bytes -> envelope.

The payload kind is chosen by the child tag of `MaltegoMessage`; there is no
discriminant attribute. Unknown children are ignored so newer clients can add
elements without breaking older servers.

This module enforces no entity count: "exactly one entity per request" is a
convention checked by `core.services.dispatch`.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from core.domain.models import (
    AdditionalField,
    DisplayLabel,
    Entity,
    ExceptionMessage,
    Genealogy,
    Limits,
    MaltegoMessage,
    Payload,
    RequestMessage,
    ResponseMessage,
    TransformException,
    TransformField,
    UIMessage,
)
from core.errors import MessageDecodeError

logger = logging.getLogger(__name__)

ROOT_TAG = "MaltegoMessage"
REQUEST_TAG = "MaltegoTransformRequestMessage"
RESPONSE_TAG = "MaltegoTransformResponseMessage"
EXCEPTION_TAG = "MaltegoTransformExceptionMessage"


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(elem: ET.Element, tag: str) -> list[ET.Element]:
    return [child for child in elem if _local(child.tag) == tag]


def _child(elem: ET.Element, tag: str) -> ET.Element | None:
    for child in elem:
        if _local(child.tag) == tag:
            return child
    return None


def _chardata(elem: ET.Element | None) -> str:
    if elem is None:
        return ""
    return "".join(elem.itertext())


def _decode_entity(elem: ET.Element) -> Entity:
    entity = Entity(
        type=elem.get("Type", ""),
        value=_chardata(_child(elem, "Value")),
        weight=_chardata(_child(elem, "Weight")),
        icon_url=_chardata(_child(elem, "IconURL")),
    )

    genealogy = _child(elem, "Genealogy")
    if genealogy is not None:
        type_elem = _child(genealogy, "Type")
        entity.genealogy = Genealogy(
            name=type_elem.get("Name", "") if type_elem is not None else "",
            old_name=type_elem.get("OldName", "") if type_elem is not None else "",
        )

    info = _child(elem, "DisplayInformation")
    if info is not None:
        entity.display_info = [
            DisplayLabel(
                text=_chardata(label),
                name=label.get("Name", ""),
                type=label.get("Type", ""),
            )
            for label in _children(info, "Label")
        ]

    fields = _child(elem, "AdditionalFields")
    if fields is not None:
        entity.fields = [
            AdditionalField(
                name=field.get("Name", ""),
                display_name=field.get("DisplayName", ""),
                matching_rule=field.get("MatchingRule", ""),
                text=_chardata(field),
            )
            for field in _children(fields, "Field")
        ]

    return entity


def _decode_entities(elem: ET.Element) -> list[Entity]:
    container = _child(elem, "Entities")
    if container is None:
        return []
    return [_decode_entity(child) for child in _children(container, "Entity")]


def _decode_request(elem: ET.Element) -> RequestMessage:
    limits = _child(elem, "Limits")
    fields = _child(elem, "TransformFields")
    return RequestMessage(
        entities=_decode_entities(elem),
        limits=Limits(
            soft_limit=limits.get("SoftLimit", "") if limits is not None else "",
            hard_limit=limits.get("HardLimit", "") if limits is not None else "",
        ),
        transform_fields=[
            TransformField(name=field.get("Name", ""), text=_chardata(field))
            for field in (_children(fields, "Field") if fields is not None else [])
        ],
    )


def _decode_response(elem: ET.Element) -> ResponseMessage:
    messages = _child(elem, "UIMessages")
    return ResponseMessage(
        entities=_decode_entities(elem),
        ui_messages=[
            UIMessage(text=_chardata(msg), message_type=msg.get("MessageType", ""))
            for msg in (_children(messages, "UIMessage") if messages is not None else [])
        ],
    )


def _decode_exception(elem: ET.Element) -> ExceptionMessage:
    container = _child(elem, "Exceptions")
    return ExceptionMessage(
        exceptions=[
            TransformException(text=_chardata(exc), code=exc.get("code", ""))
            for exc in (_children(container, "Exception") if container is not None else [])
        ]
    )


_PAYLOAD_DECODERS = {
    REQUEST_TAG: _decode_request,
    RESPONSE_TAG: _decode_response,
    EXCEPTION_TAG: _decode_exception,
}


def decode(data: bytes | str) -> MaltegoMessage:
    """Parse a wire payload into a `MaltegoMessage`.

    Raises:
        MessageDecodeError: malformed XML or a root element other than
            `MaltegoMessage`.
    """

    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise MessageDecodeError(f"malformed message: {exc}") from exc

    if _local(root.tag) != ROOT_TAG:
        raise MessageDecodeError(
            f"expected element type <{ROOT_TAG}> but have <{_local(root.tag)}>"
        )

    payload: Payload | None = None
    for child in root:
        tag = _local(child.tag)
        decoder = _PAYLOAD_DECODERS.get(tag)
        if decoder is None:
            logger.debug("Ignoring unknown element <%s>", tag)
            continue
        if payload is not None:
            logger.debug("Ignoring additional payload <%s>", tag)
            continue
        payload = decoder(child)

    return MaltegoMessage(payload=payload)
