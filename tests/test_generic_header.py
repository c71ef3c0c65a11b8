import pytest

from domain.headers.content_type import ContentType
from domain.headers.exceptions import InvalidArgumentException
from domain.headers.generic_header import GenericHeader
from domain.headers.header_interface import FORMAT_ENCODED, HeaderInterface
from domain.headers.loader import HeaderLoader
from domain.headers.sender import Sender


def test_generic_header_from_string_decodes_and_unfolds():
    header = GenericHeader.from_string("Subject: =?UTF-8?Q?Informe_de_producci=C3=B3n?=\r\n de agosto")
    assert header.get_field_name() == "Subject"
    assert header.get_field_value() == "Informe de producción de agosto"
    assert header.get_encoding() == "UTF-8"


def test_generic_header_to_string_encodes_non_ascii():
    header = GenericHeader("Subject", "año")
    assert header.to_string() == "Subject: =?UTF-8?Q?a=C3=B1o?="
    assert header.get_field_value(FORMAT_ENCODED) == "=?UTF-8?Q?a=C3=B1o?="


def test_generic_header_rejects_crlf_in_value():
    with pytest.raises(InvalidArgumentException, match="header value"):
        GenericHeader("Subject", "hola\r\nBcc: evil@bar")


def test_generic_header_rejects_invalid_name():
    with pytest.raises(InvalidArgumentException, match="header name"):
        GenericHeader("Sub ject", "x")


def test_split_header_line():
    assert GenericHeader.split_header_line("X-Test:   value") == ("X-Test", "value")
    assert HeaderInterface.split_header_line("X-Test: a\r\n b") == ("X-Test", "a\r\n b")
    with pytest.raises(InvalidArgumentException, match="header value"):
        GenericHeader.split_header_line("X-Test: a\nb")
    with pytest.raises(InvalidArgumentException, match="header name"):
        GenericHeader.split_header_line("X Test: a")


@pytest.mark.parametrize("line,cls", [
    ("Content-Type: text/plain", ContentType),
    ("content-type: text/plain", ContentType),
    ("SENDER: <foo@bar>", Sender),
    ("Subject: hola", GenericHeader),
])
def test_loader_picks_class_by_field_name(line, cls):
    header = HeaderLoader().load(line)
    assert type(header) is cls


def test_loader_register():
    class XTest(GenericHeader):
        pass

    loader = HeaderLoader()
    loader.register("X-Test", XTest)
    assert loader.get("x-test") is XTest
    assert isinstance(loader.load("X-Test: 1"), XTest)


def test_loader_propagates_errors():
    with pytest.raises(InvalidArgumentException):
        HeaderLoader().load("Content-Type: text/html;\nlevel=1")


def test_parse_failure_is_logged_with_state(caplog):
    caplog.set_level("DEBUG", logger="domain.headers.header_interface")
    with pytest.raises(InvalidArgumentException):
        ContentType.from_string("Content-Type: text/html;\nlevel=1")
    assert "UNFOLD → FAILED" in caplog.text
