from core.wire.escape import cdata, escape, xml_escape


def test_newline_is_restored():
    assert escape("\n") == "\n"
    assert escape("line one\nline two") == "line one\nline two"


def test_markup_characters():
    assert escape("a&b<c>d") == "a&amp;b&lt;c&gt;d"
    assert escape("\"quoted\" 'single'") == "&#34;quoted&#34; &#39;single&#39;"


def test_other_whitespace_stays_escaped():
    assert escape("a\tb\rc") == "a&#x9;b&#xD;c"


def test_plain_text_untouched():
    assert escape("alpine.paterva.com") == "alpine.paterva.com"
    assert escape("pãypal.com") == "pãypal.com"
    assert escape("") == ""


def test_invalid_characters_replaced():
    assert escape("a\x00b") == "a\ufffdb"
    assert escape("\x1b") == "\ufffd"


def test_bytes_input():
    assert escape("café".encode("utf-8")) == "café"


def test_undecodable_bytes_yield_empty_string(caplog):
    assert escape(b"\xff\xfe") == ""
    assert "Cannot escape" in caplog.text


def test_non_text_input_yields_empty_string():
    assert escape(42) == ""  # type: ignore[arg-type]


def test_xml_escape_keeps_newline_entity():
    assert xml_escape("a\nb") == "a&#xA;b"


def test_cdata_splits_terminator():
    assert cdata("text") == "<![CDATA[text]]>"
    assert cdata("a]]>b") == "<![CDATA[a]]]]><![CDATA[>b]]>"
