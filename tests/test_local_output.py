import io

import pytest

from adapters.local_output import die, emit
from core.domain.models import MaltegoMessage


def test_die_prints_fatal_message_and_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        die("boom", "invalid ip")

    assert excinfo.value.code == 0
    assert capsys.readouterr().out == (
        '<MaltegoMessage><MaltegoTransformResponseMessage><Entities></Entities>'
        '<UIMessages><UIMessage MessageType="FatalError">invalid ip: boom</UIMessage></UIMessages>'
        '</MaltegoTransformResponseMessage></MaltegoMessage>\n'
    )


def test_emit_to_stream():
    message = MaltegoMessage()
    message.add_entity("maltego.Phrase", "hi")
    stream = io.StringIO()

    emit(message, stream=stream)

    assert stream.getvalue().endswith("</MaltegoMessage>\n")
    assert '<Entity Type="maltego.Phrase"><Value>hi</Value>' in stream.getvalue()
