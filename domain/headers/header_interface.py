# domain/headers/header_interface.py
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from domain import grammar
from domain.exceptions import MailException
from domain.folding import unfold
from domain.headers.exceptions import InvalidArgumentException
from domain.models import ErrorKind, HeaderValue, ParseState

logger = logging.getLogger(__name__)

FORMAT_RAW = False
FORMAT_ENCODED = True


class HeaderInterface(ABC):
    """
    Contrato común de todas las cabeceras.
    `from_string` recorre siempre los mismos pasos:
        START → SPLIT_NAME_VALUE → VALIDATE_NAME → UNFOLD
              → FIELD_SPECIFIC_PARSE → DECODE_DISPLAY_NAMES → DONE
    y cualquier fallo deja el parseo en FAILED y propaga la excepción (nunca se
    devuelve un objeto a medio construir).
    """
    FIELD_NAME: ClassVar[str | None] = None

    # ───────── parseo ─────────
    @classmethod
    def from_string(cls, header_line: str) -> "HeaderInterface":
        state = ParseState.START
        try:
            state = ParseState.SPLIT_NAME_VALUE
            name, value = cls._split(header_line)

            state = ParseState.VALIDATE_NAME
            grammar.validate_header_name(name)
            cls._accept_field_name(name)

            state = ParseState.UNFOLD
            grammar.validate_field_value(value)
            value = unfold(value.lstrip())

            state = ParseState.FIELD_SPECIFIC_PARSE
            parsed = cls._parse_field_value(value)

            state = ParseState.DECODE_DISPLAY_NAMES
            parsed = cls._decode_parsed(parsed)
            header = cls._build(name, parsed)
        except MailException:
            logger.debug("%s.from_string: %s → %s", cls.__name__, state.name, ParseState.FAILED.name)
            raise

        logger.debug("%s.from_string: %s", cls.__name__, ParseState.DONE.name)
        return header

    @staticmethod
    def _split(header_line: str) -> tuple[str, str]:
        if not isinstance(header_line, str):
            raise InvalidArgumentException("Invalid header value detected", kind=ErrorKind.HEADER_VALUE)
        name, sep, value = header_line.partition(":")
        if not sep:
            raise InvalidArgumentException(
                'Header must match with the format "name: value"; invalid header value',
                kind=ErrorKind.HEADER_VALUE,
            )
        return name, value

    @staticmethod
    def split_header_line(header_line: str) -> tuple[str, str]:
        """Separa `nombre: valor` validando ambos; el valor vuelve sin espacios iniciales."""
        name, value = HeaderInterface._split(header_line)
        grammar.validate_header_name(name)
        grammar.validate_field_value(value)
        return name, value.lstrip()

    @classmethod
    def _accept_field_name(cls, name: str) -> None:
        if cls.FIELD_NAME and name.lower() != cls.FIELD_NAME.lower():
            raise InvalidArgumentException(
                f"Invalid header name for {cls.FIELD_NAME} string", kind=ErrorKind.HEADER_NAME
            )

    @classmethod
    @abstractmethod
    def _parse_field_value(cls, value: str) -> dict[str, Any]:
        ...

    @classmethod
    def _decode_parsed(cls, parsed: dict[str, Any]) -> dict[str, Any]:
        return parsed

    @classmethod
    @abstractmethod
    def _build(cls, field_name: str, parsed: dict[str, Any]) -> "HeaderInterface":
        ...

    # ───────── acceso / serialización ─────────
    def get_field_name(self) -> str:
        return self.FIELD_NAME or ""

    @abstractmethod
    def get_field_value(self, format: bool = FORMAT_RAW) -> str:
        ...

    @abstractmethod
    def get_encoding(self) -> str:
        ...

    def to_header_value(self) -> HeaderValue:
        return HeaderValue(field_name=self.get_field_name(), field_value=self.get_field_value(FORMAT_RAW))

    def to_string(self) -> str:
        return f"{self.get_field_name()}: {self.get_field_value(FORMAT_ENCODED)}"

    def __str__(self) -> str:
        return self.to_string()
