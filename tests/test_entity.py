import pytest

from core.domain.constants import BookmarkColor, LinkDirection, LinkStyle, MatchingRule
from core.domain.models import Entity, title_case


def test_new_does_not_escape():
    entity = Entity.new("maltego.Phrase", "a&b", "7")
    assert entity.value == "a&b"
    assert entity.weight == "7"
    assert entity.fields is None
    assert entity.display_info is None


def test_get_field_by_name_without_fields():
    entity = Entity.new("maltego.Phrase", "x", "100")
    assert entity.get_field_by_name("missing") == ""
    assert entity.get_field("missing") is None


def test_add_property_escapes_and_appends():
    entity = Entity.new("maltego.Phrase", "x", "100")
    entity.add_property("note", "Note", MatchingRule.LOOSE, "<b>")
    field = entity.fields[0]
    assert field.name == "note"
    assert field.display_name == "Note"
    assert field.matching_rule == "loose"
    assert field.text == "&lt;b&gt;"


def test_duplicate_names_are_kept_and_first_wins():
    entity = Entity.new("maltego.Phrase", "x", "100")
    entity.add_prop("ip", "1.1.1.1")
    entity.add_prop("ip", "8.8.8.8")
    assert len(entity.fields) == 2
    assert entity.get_field_by_name("ip") == "1.1.1.1"


def test_present_but_empty_field():
    entity = Entity.new("maltego.Phrase", "x", "100")
    entity.add_prop("empty", "")
    assert entity.get_field_by_name("empty") == ""
    assert entity.get_field("empty") is not None


def test_add_prop_is_strict_with_title_display_name():
    entity = Entity.new("maltego.Phrase", "x", "100")
    field = entity.add_prop("properties.interface", "eth0")
    assert field.matching_rule == "strict"
    assert field.display_name == "Properties.Interface"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("fqdn", "Fqdn"),
        ("fooBar baz-qux", "FooBar Baz-Qux"),
        ("snake_case", "Snake_case"),
        ("", ""),
    ],
)
def test_title_case(raw, expected):
    assert title_case(raw) == expected


def test_display_information_is_lazy():
    entity = Entity.new("maltego.Phrase", "x", "100")
    label = entity.add_display_information("<h1>hi</h1>", "Info")
    entity.add_display_information("second", "More")
    assert label.type == "text/html"
    assert label.text == "<h1>hi</h1>"
    assert [l.name for l in entity.display_info] == ["Info", "More"]


@pytest.mark.parametrize(
    "setter, argument, name, display_name, text",
    [
        ("set_link_color", "#ff0000", "link#maltego.link.color", "LinkColor", "#ff0000"),
        ("set_link_style", LinkStyle.DASHED, "link#maltego.link.style", "LinkStyle", "1"),
        ("set_link_thickness", 3, "link#maltego.link.thickness", "LinkThickness", "3"),
        ("set_link_label", "resolves to", "link#maltego.link.label", "Label", "resolves to"),
        ("set_bookmark", BookmarkColor.RED, "bookmark#", "Bookmark", "4"),
        ("set_note", "checked", "notes#", "Notes", "checked"),
        (
            "set_link_direction",
            LinkDirection.OUTPUT_TO_INPUT,
            "link#maltego.link.direction",
            "Direction",
            "output-to-input",
        ),
    ],
)
def test_link_setters(setter, argument, name, display_name, text):
    entity = Entity.new("maltego.Phrase", "x", "100")
    getattr(entity, setter)(argument)
    field = entity.fields[-1]
    assert field.name == name
    assert field.display_name == display_name
    assert field.matching_rule == "loose"
    assert field.text == text


def test_icon_url():
    entity = Entity.new("maltego.Phrase", "x", "100")
    entity.set_icon_url("http://example.com/icon.png")
    assert entity.icon_url == "http://example.com/icon.png"
