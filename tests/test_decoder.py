import pytest

from core.domain.models import Entity, MaltegoMessage
from core.errors import MessageDecodeError
from core.wire.decoder import decode
from core.wire.encoder import render


def test_decode_compact_request(compact_request):
    message = decode(compact_request)

    request = message.request
    assert request is not None
    assert message.response is None
    assert message.exception is None
    assert len(request.entities) == 1

    entity = request.entities[0]
    assert entity.type == "DNSName"
    assert entity.value == "alpine.paterva.com"
    assert entity.weight == "0"
    assert entity.fields is None
    assert request.limits.soft_limit == "256"
    assert request.limits.hard_limit == "256"


def test_decode_request_with_genealogy_and_fields(pretty_request):
    message = decode(pretty_request.encode("utf-8"))

    entity = message.request.entities[0]
    assert entity.genealogy.name == "maltego.DNSName"
    assert entity.genealogy.old_name == "DNSName"
    assert len(entity.fields) == 1
    assert entity.fields[0].name == "fqdn"
    assert entity.fields[0].display_name == "DNS Name"
    assert entity.get_field_by_name("fqdn") == "alpine.paterva.com"


def test_decode_transform_fields():
    message = decode(
        '<MaltegoMessage><MaltegoTransformRequestMessage><Entities>'
        '<Entity Type="maltego.Phrase"><Value>x</Value><Weight>0</Weight></Entity></Entities>'
        '<TransformFields><Field Name="api.key">secret</Field></TransformFields>'
        '</MaltegoTransformRequestMessage></MaltegoMessage>'
    )
    assert message.request.get_transform_field("api.key") == "secret"
    assert message.request.get_transform_field("missing") == ""
    assert message.request.limits.soft_limit == ""


def test_decode_response_with_cdata():
    message = decode(
        """<MaltegoMessage>
        <MaltegoTransformResponseMessage>
            <Entities>
                <Entity Type="maltego.IPv4Address">
                    <Value><![CDATA[173.230.156.137]]></Value>
                    <Weight>100</Weight>
                </Entity>
            </Entities>
            <UIMessages>
                <UIMessage MessageType="Inform">Slider value is at: 256</UIMessage>
            </UIMessages>
        </MaltegoTransformResponseMessage>
    </MaltegoMessage>"""
    )

    response = message.response
    assert message.request is None
    assert response.entities[0].type == "maltego.IPv4Address"
    assert response.entities[0].value == "173.230.156.137"
    assert response.entities[0].weight == "100"
    assert response.ui_messages[0].message_type == "Inform"
    assert response.ui_messages[0].text == "Slider value is at: 256"


def test_decode_exception():
    message = decode(
        '<MaltegoMessage><MaltegoTransformExceptionMessage><Exceptions>'
        '<Exception code="errorCode">oops</Exception>'
        '</Exceptions></MaltegoTransformExceptionMessage></MaltegoMessage>'
    )
    assert message.exception.exceptions[0].code == "errorCode"
    assert message.exception.exceptions[0].text == "oops"


def test_unknown_children_are_ignored(compact_request):
    data = compact_request.replace("<MaltegoMessage>", "<MaltegoMessage><Unknown a='1'/>")
    message = decode(data)
    assert message.request.entities[0].value == "alpine.paterva.com"


def test_first_payload_wins():
    message = decode(
        '<MaltegoMessage>'
        '<MaltegoTransformExceptionMessage><Exceptions><Exception code="c">x</Exception></Exceptions>'
        '</MaltegoTransformExceptionMessage>'
        '<MaltegoTransformResponseMessage></MaltegoTransformResponseMessage>'
        '</MaltegoMessage>'
    )
    assert message.exception is not None
    assert message.response is None


def test_no_payload():
    message = decode("<MaltegoMessage></MaltegoMessage>")
    assert message.payload is None


def test_wrong_root_element():
    with pytest.raises(MessageDecodeError, match="MaltegoMessage"):
        decode("<Other></Other>")


@pytest.mark.parametrize("data", ["", "<MaltegoMessage>", "not xml at all", b"\x00\x01"])
def test_malformed_input(data):
    with pytest.raises(MessageDecodeError):
        decode(data)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        decode("<broken")


def test_request_fields_survive_into_response(pretty_request):
    message = decode(pretty_request)
    source = message.request.entities[0]

    entity = message.add_entity(source.type, source.value)
    for field in source.fields:
        entity.add_property(field.name, field.display_name, "strict", field.text)

    output = render(message)
    assert (
        '<Entity Type="DNSName"><Value>alpine.paterva.com</Value><Weight>100</Weight>'
        '<AdditionalFields>'
        '<Field MatchingRule="strict" Name="fqdn" DisplayName="DNS Name">alpine.paterva.com</Field>'
        '</AdditionalFields></Entity>'
    ) in output

    # The request stays readable after the envelope became a response.
    assert message.request is not None
    assert message.request.entities[0] is source


def test_encoded_request_decodes_to_same_wire_text():
    message = MaltegoMessage.new_request(
        [Entity.new("maltego.Domain", "example.com", "0")],
        soft_limit=12,
        hard_limit=255,
        fields={"depth": "2"},
    )
    message.request.entities[0].add_prop("whois", "ns1 & ns2")
    wire = render(message)
    assert render(decode(wire)) == wire
