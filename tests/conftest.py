import pytest


# Sample request of the client's "DNSToIP" example transform.
PRETTY_REQUEST = """<MaltegoMessage>
    <MaltegoTransformRequestMessage>
        <Entities>
            <Entity Type="DNSName">
                <Genealogy>
                    <Type Name="maltego.DNSName" OldName="DNSName"/>
                </Genealogy>
                <AdditionalFields>
                    <Field Name="fqdn" DisplayName="DNS Name">alpine.paterva.com</Field>
                </AdditionalFields>
                <Value>alpine.paterva.com</Value>
                <Weight>0</Weight>
            </Entity>
        </Entities>
        <Limits SoftLimit="256" HardLimit="256"/>
    </MaltegoTransformRequestMessage>
</MaltegoMessage>"""

COMPACT_REQUEST = (
    '<MaltegoMessage><MaltegoTransformRequestMessage><Entities>'
    '<Entity Type="DNSName"><Value>alpine.paterva.com</Value><Weight>0</Weight></Entity>'
    '</Entities><Limits SoftLimit="256" HardLimit="256"/>'
    '</MaltegoTransformRequestMessage></MaltegoMessage>'
)


@pytest.fixture
def pretty_request():
    return PRETTY_REQUEST


@pytest.fixture
def compact_request():
    return COMPACT_REQUEST


@pytest.fixture
def request_file(tmp_path):
    path = tmp_path / "request.xml"
    path.write_text(PRETTY_REQUEST, encoding="utf-8")
    return path
