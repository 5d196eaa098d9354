"""Domain models of the transform protocol (Pydantic v2).

The models describe *what* travels on the wire; the XML shape lives in
`core.wire`. String-typed protocol values (weights, limits, enumerations) are
kept as wire text so a decoded message re-encodes to the same bytes.

Mutation helpers (`add_entity`, `add_property`, ...) operate in place and
return handles into the message so handlers can keep decorating them.
"""

from __future__ import annotations

import logging
from typing import Union

from pydantic import BaseModel, Field, PrivateAttr

from core.domain.constants import (
    DEFAULT_ENTITY_WEIGHT,
    DISPLAY_LABEL_TYPE,
    BookmarkColor,
    LinkDirection,
    LinkProperty,
    LinkStyle,
    MatchingRule,
    UIMessageType,
    wire_text,
)
from core.wire.escape import escape

logger = logging.getLogger(__name__)


def _is_separator(ch: str) -> bool:
    if ch <= "\x7f":
        return not (ch.isascii() and (ch.isalnum() or ch == "_"))
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def title_case(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched.

    `str.title()` would also lower-case the tail (`fooBar` -> `Foobar`); the
    client expects `FooBar`.
    """

    out: list[str] = []
    prev = " "
    for ch in text:
        if _is_separator(prev):
            upper = ch.upper()
            out.append(upper if len(upper) == 1 else ch)
        else:
            out.append(ch)
        prev = ch
    return "".join(out)


class Genealogy(BaseModel):
    """Type lineage of a request entity (`Genealogy/Type`)."""

    name: str = Field(default="", description="Current fully qualified type name.")
    old_name: str = Field(default="", description="Legacy (unqualified) type name.")


class DisplayLabel(BaseModel):
    """HTML label shown in the client's detail view, carried as CDATA."""

    text: str = Field(default="", description="Label body (HTML allowed).")
    name: str = Field(default="", description="Label title.")
    type: str = Field(default=DISPLAY_LABEL_TYPE, description="Always text/html.")


class AdditionalField(BaseModel):
    """A property attached to an entity.

    Names are not unique inside an entity; lookups return the first match.
    """

    name: str = Field(..., description="Property identifier (e.g. 'fqdn').")
    display_name: str = Field(default="", description="Human readable name.")
    matching_rule: str = Field(
        default=MatchingRule.STRICT.value,
        description="Merge hint for the client ('strict' or 'loose').",
    )
    text: str = Field(default="", description="Escaped property value.")


class Entity(BaseModel):
    """A graph node sent to or received from the client."""

    type: str = Field(..., description="Entity type, e.g. 'maltego.DNSName'.")
    value: str = Field(default="", description="Main value (escaped on the way out).")
    weight: str = Field(default="", description="Numeric weight as wire text.")
    genealogy: Genealogy | None = None
    display_info: list[DisplayLabel] | None = None
    icon_url: str = ""
    fields: list[AdditionalField] | None = None

    @classmethod
    def new(cls, type: str, value: str, weight: str) -> "Entity":
        """Create an entity. `value` is stored as given; escaping is up to the caller."""

        return cls(type=type, value=value, weight=weight)

    def get_field(self, name: str) -> AdditionalField | None:
        for field in self.fields or ():
            if field.name == name:
                return field
        return None

    def get_field_by_name(self, name: str) -> str:
        """Return the text of the first field called `name`, or ""."""

        field = self.get_field(name)
        return field.text if field is not None else ""

    def add_property(
        self,
        name: str,
        display_name: str,
        matching_rule: MatchingRule | str,
        value: str,
    ) -> AdditionalField:
        if self.fields is None:
            self.fields = []
        field = AdditionalField(
            name=name,
            display_name=display_name,
            matching_rule=wire_text(matching_rule),
            text=escape(value),
        )
        self.fields.append(field)
        return field

    def add_prop(self, name: str, value: str) -> AdditionalField:
        """Shorthand for a strict property displayed under the title-cased name."""

        return self.add_property(name, title_case(name), MatchingRule.STRICT, value)

    def add_display_information(self, text: str, name: str) -> DisplayLabel:
        if self.display_info is None:
            self.display_info = []
        label = DisplayLabel(text=text, name=name)
        self.display_info.append(label)
        return label

    def set_icon_url(self, url: str) -> None:
        self.icon_url = url

    # Link and node decorations. The field names are reserved by the client and
    # always use the loose matching rule.

    def set_link_color(self, color: str) -> None:
        self.add_property(LinkProperty.COLOR.value, "LinkColor", MatchingRule.LOOSE, color)

    def set_link_style(self, style: LinkStyle | str) -> None:
        self.add_property(LinkProperty.STYLE.value, "LinkStyle", MatchingRule.LOOSE, wire_text(style))

    def set_link_thickness(self, thickness: int) -> None:
        self.add_property(LinkProperty.THICKNESS.value, "LinkThickness", MatchingRule.LOOSE, str(thickness))

    def set_link_label(self, label: str) -> None:
        self.add_property(LinkProperty.LABEL.value, "Label", MatchingRule.LOOSE, label)

    def set_bookmark(self, bookmark: BookmarkColor | str) -> None:
        self.add_property(LinkProperty.BOOKMARK.value, "Bookmark", MatchingRule.LOOSE, wire_text(bookmark))

    def set_note(self, note: str) -> None:
        self.add_property(LinkProperty.NOTES.value, "Notes", MatchingRule.LOOSE, note)

    def set_link_direction(self, direction: LinkDirection | str) -> None:
        self.add_property(
            LinkProperty.DIRECTION.value,
            "Direction",
            MatchingRule.LOOSE,
            wire_text(direction),
        )


class Limits(BaseModel):
    soft_limit: str = Field(default="", description="Soft result limit (wire text).")
    hard_limit: str = Field(default="", description="Hard result limit (wire text).")


class TransformField(BaseModel):
    """Transform setting sent along with a request (`TransformFields/Field`)."""

    name: str
    text: str = ""


class UIMessage(BaseModel):
    text: str = ""
    message_type: str = Field(default=UIMessageType.INFORM.value)


class TransformException(BaseModel):
    text: str = ""
    code: str = ""


class RequestMessage(BaseModel):
    """Inbound payload: the entities a transform runs on."""

    entities: list[Entity] = Field(default_factory=list)
    limits: Limits = Field(default_factory=Limits)
    transform_fields: list[TransformField] = Field(default_factory=list)

    def get_transform_field(self, name: str) -> str:
        for field in self.transform_fields:
            if field.name == name:
                return field.text
        return ""


class ResponseMessage(BaseModel):
    """Outbound payload: result entities plus messages for the user."""

    entities: list[Entity] = Field(default_factory=list)
    ui_messages: list[UIMessage] = Field(default_factory=list)


class ExceptionMessage(BaseModel):
    """Outbound payload signalling that the transform failed."""

    exceptions: list[TransformException] = Field(default_factory=list)


Payload = Union[RequestMessage, ResponseMessage, ExceptionMessage]


class MaltegoMessage(BaseModel):
    """Root envelope (`MaltegoMessage`).

    `payload` holds exactly one of the three payload kinds, so a message can
    never carry a response and an exception at the same time. The request an
    envelope was decoded from stays available through `request` after the
    handler turned the envelope into a response.
    """

    payload: Payload | None = None

    _request: RequestMessage | None = PrivateAttr(default=None)

    @classmethod
    def new_request(
        cls,
        entities: list[Entity],
        *,
        soft_limit: int | str = "",
        hard_limit: int | str = "",
        fields: dict[str, str] | None = None,
    ) -> "MaltegoMessage":
        request = RequestMessage(
            entities=list(entities),
            limits=Limits(soft_limit=str(soft_limit), hard_limit=str(hard_limit)),
            transform_fields=[TransformField(name=k, text=v) for k, v in (fields or {}).items()],
        )
        return cls(payload=request)

    @property
    def request(self) -> RequestMessage | None:
        if isinstance(self.payload, RequestMessage):
            return self.payload
        return self._request

    @property
    def response(self) -> ResponseMessage | None:
        return self.payload if isinstance(self.payload, ResponseMessage) else None

    @property
    def exception(self) -> ExceptionMessage | None:
        return self.payload if isinstance(self.payload, ExceptionMessage) else None

    def _leave_request(self) -> None:
        if isinstance(self.payload, RequestMessage):
            self._request = self.payload
            self.payload = None

    def _ensure_response(self) -> ResponseMessage:
        self._leave_request()
        if isinstance(self.payload, ExceptionMessage):
            # Exceptions win on the wire; late content goes to a detached response.
            logger.debug("Message already carries exceptions; dropping response content")
            return ResponseMessage()
        if self.payload is None:
            self.payload = ResponseMessage()
        return self.payload

    def add_entity(self, type: str, value: str) -> Entity:
        """Append a result entity (escaped value, weight 100) and return it."""

        response = self._ensure_response()
        entity = Entity.new(type, escape(value), DEFAULT_ENTITY_WEIGHT)
        response.entities.append(entity)
        return entity

    def add_ui_message(self, text: str, message_type: UIMessageType | str) -> UIMessage:
        response = self._ensure_response()
        message = UIMessage(text=text, message_type=wire_text(message_type))
        response.ui_messages.append(message)
        return message

    def add_exception(self, text: str, code: str) -> TransformException:
        """Append an exception; any staged response content is dropped."""

        self._leave_request()
        if isinstance(self.payload, ResponseMessage):
            logger.debug(
                "Dropping staged response (%d entities) in favour of an exception",
                len(self.payload.entities),
            )
            self.payload = None
        if self.payload is None:
            self.payload = ExceptionMessage()
        exception = TransformException(text=text, code=code)
        self.payload.exceptions.append(exception)
        return exception

    def clear_response(self) -> None:
        if isinstance(self.payload, ResponseMessage):
            self.payload = None
