# domain/headers/sender.py
from __future__ import annotations
from typing import Any

from domain import encoded_word, grammar
from domain.address import Address, split_address
from domain.headers.exceptions import InvalidArgumentException
from domain.headers.header_interface import FORMAT_ENCODED, FORMAT_RAW, HeaderInterface
from domain.models import ErrorKind


class Sender(HeaderInterface):
    FIELD_NAME = "Sender"

    def __init__(self) -> None:
        self._address: Address | None = None

    # ───────── parseo ─────────
    @classmethod
    def _parse_field_value(cls, value: str) -> dict[str, Any]:
        grammar.assert_no_crlf(value, ErrorKind.HEADER_VALUE, "Invalid header value detected")
        email, name, quoted = split_address(value)
        return {"email": email, "name": name, "quoted": quoted}

    @classmethod
    def _decode_parsed(cls, parsed: dict[str, Any]) -> dict[str, Any]:
        if parsed["name"] and not parsed["quoted"]:
            parsed["name"] = encoded_word.decode_value(parsed["name"])
        return parsed

    @classmethod
    def _build(cls, field_name: str, parsed: dict[str, Any]) -> "Sender":
        header = cls()
        header.set_address(parsed["email"], parsed["name"])
        return header

    # ───────── dirección ─────────
    def set_address(self, email_or_address: str | Address, name: str | None = None) -> "Sender":
        """
        - str     → se construye (y valida) una Address propia.
        - Address → se guarda la misma instancia (compartida con quien llama).
        """
        if isinstance(email_or_address, Address):
            self._address = email_or_address
        elif isinstance(email_or_address, str):
            self._address = Address(email_or_address, name)
        else:
            raise InvalidArgumentException(
                "Invalid address: expected an email string or an Address", kind=ErrorKind.ADDRESS
            )
        return self

    def get_address(self) -> Address | None:
        return self._address

    def get_encoding(self) -> str:
        if self._address is None:
            return encoded_word.ASCII
        return self._address.get_encoding()

    # ───────── serialización ─────────
    def get_field_value(self, format: bool = FORMAT_RAW) -> str:
        if self._address is None:
            return ""
        if format == FORMAT_ENCODED:
            return self._address.format()
        if not self._address.name:
            return f"<{self._address.email}>"
        return f"{self._address.name} <{self._address.email}>"
