"""Built-in transforms.

Small, dependency-free transforms used by the CLI to exercise the dispatcher
end to end and as templates for real ones.
"""

from __future__ import annotations

from core.domain import entity_types
from core.domain.constants import LinkStyle, UIMessageType
from core.domain.models import MaltegoMessage
from core.errors import TransformError
from core.services.registry import TransformRegistry


def echo(message: MaltegoMessage) -> None:
    """Return the input entity unchanged, properties included."""

    request = message.request
    assert request is not None
    source = request.entities[0]
    entity = message.add_entity(source.type, source.value)
    for field in source.fields or ():
        entity.add_property(field.name, field.display_name, field.matching_rule or "strict", field.text)


def to_phrase_words(message: MaltegoMessage) -> None:
    """Split the input value into one `maltego.Phrase` per word."""

    request = message.request
    assert request is not None
    words = request.entities[0].value.split()
    if not words:
        raise TransformError("input entity has no value", code="empty-value")

    for position, word in enumerate(words, start=1):
        entity = message.add_entity(entity_types.PHRASE, word)
        entity.add_prop("position", str(position))
        entity.set_link_label(f"word {position}")
        entity.set_link_style(LinkStyle.DOTTED)
    message.add_ui_message(f"{len(words)} words", UIMessageType.DEBUG)


def build_registry(*, dump_messages: bool = False) -> TransformRegistry:
    registry = TransformRegistry(dump_messages=dump_messages)
    registry.register("echo", echo)
    registry.register("toPhraseWords", to_phrase_words)
    return registry
