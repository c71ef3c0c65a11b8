import dataclasses

import pytest

from domain import encoded_word
from domain.address import Address, split_address
from domain.exceptions import InvalidArgumentException
from domain.models import ErrorKind


def test_address_without_name():
    address = Address("foo@bar")
    assert address.name is None
    assert address.format() == "<foo@bar>"
    assert address.get_encoding() == "ASCII"


def test_address_with_ascii_name():
    address = Address("foo@bar", "foo")
    assert address.format() == "foo <foo@bar>"
    assert address.get_encoding() == "ASCII"


def test_address_with_utf8_name_is_encoded():
    address = Address("foo@bar", "ázÁZ09")
    assert address.get_encoding() == "UTF-8"
    assert address.format() == "=?UTF-8?Q?=C3=A1z=C3=81Z09?= <foo@bar>"
    encoded = address.format().rsplit(" <", 1)[0]
    assert encoded_word.decode_value(encoded) == "ázÁZ09"


def test_name_with_specials_is_quoted():
    address = Address("foo@bar", 'Doe, "JD" John')
    assert address.format() == '"Doe, \\"JD\\" John" <foo@bar>'
    assert Address.from_string(address.format()) == address


def test_empty_name_means_no_name():
    assert Address("foo@bar", "").name is None
    assert Address("foo@bar", "   ").format() == "<foo@bar>"


@pytest.mark.parametrize("email", [
    "foo@bar",
    "foo.bar@example.com",
    "first_last-1@mail.example-domain.org",
])
def test_valid_emails(email):
    assert Address(email).email == email


@pytest.mark.parametrize("email,name", [
    ("", None),
    ("azAZ09-_", None),
    ("ázÁZ09-_", None),
    ("foo@@bar", None),
    ("foo@bar@baz", None),
    (".foo@bar", None),
    ("foo@bar.", None),
    ("foo bar@baz", None),
    ("foo@bar\n", None),
    ("foo@bar\r", None),
    ("foo@bar\r\n", None),
    ("foo@bar", "\r"),
    ("foo@bar", "\n"),
    ("foo@bar", "\r\n"),
    ("foo@bar", "foo\r\nevilBody"),
    ("foo@bar", "\r\nevilBody"),
])
def test_invalid_addresses(email, name):
    with pytest.raises(InvalidArgumentException) as info:
        Address(email, name)
    assert info.value.kind is ErrorKind.ADDRESS


def test_address_is_immutable():
    address = Address("foo@bar", "foo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        address.email = "evil@bar"


@pytest.mark.parametrize("value,expected", [
    ("<foo@bar>", Address("foo@bar")),
    ("foo@bar", Address("foo@bar")),
    ("foo <foo@bar>", Address("foo@bar", "foo")),
    ("=?UTF-8?Q?=C3=A1z=C3=81Z09?= <foo@bar>", Address("foo@bar", "ázÁZ09")),
    ('"=?UTF-8?Q?x?=" <foo@bar>', Address("foo@bar", "=?UTF-8?Q?x?=")),
])
def test_from_string(value, expected):
    assert Address.from_string(value) == expected


def test_from_string_rejects_decoded_crlf_in_name():
    with pytest.raises(InvalidArgumentException, match="address name"):
        Address.from_string("=?UTF-8?Q?foo=0D=0AevilBody?= <foo@bar>")


def test_split_address():
    assert split_address(' "A \\"B\\"" <a@b> ') == ("a@b", 'A "B"', True)
    assert split_address("<a@b>") == ("a@b", None, False)
    assert split_address("a@b") == ("a@b", None, False)
