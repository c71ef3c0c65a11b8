# domain/headers/generic_header.py
from __future__ import annotations
from typing import Any

from domain import encoded_word, grammar
from domain.headers.header_interface import FORMAT_ENCODED, FORMAT_RAW, HeaderInterface
from domain.models import ErrorKind


class GenericHeader(HeaderInterface):
    """Cualquier cabecera sin clase propia: nombre + valor lógico (decodificado)."""

    def __init__(self, field_name: str | None = None, field_value: str | None = None) -> None:
        self._field_name = ""
        self._field_value = ""
        if field_name is not None:
            self.set_field_name(field_name)
        if field_value is not None:
            self.set_field_value(field_value)

    @classmethod
    def _parse_field_value(cls, value: str) -> dict[str, Any]:
        return {"value": value}

    @classmethod
    def _decode_parsed(cls, parsed: dict[str, Any]) -> dict[str, Any]:
        parsed["value"] = encoded_word.decode_value(parsed["value"])
        return parsed

    @classmethod
    def _build(cls, field_name: str, parsed: dict[str, Any]) -> "GenericHeader":
        return cls(field_name, parsed["value"])

    def set_field_name(self, name: str) -> "GenericHeader":
        grammar.validate_header_name(name)
        self._field_name = name
        return self

    def get_field_name(self) -> str:
        return self._field_name

    def set_field_value(self, value: str) -> "GenericHeader":
        grammar.assert_no_crlf(value, ErrorKind.HEADER_VALUE, "Invalid header value detected")
        self._field_value = value
        return self

    def get_field_value(self, format: bool = FORMAT_RAW) -> str:
        if format == FORMAT_ENCODED:
            return encoded_word.encode(self._field_value)[0]
        return self._field_value

    def get_encoding(self) -> str:
        return encoded_word.detect_encoding(self._field_value)
