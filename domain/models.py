# domain/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    HEADER_NAME = "header name"
    HEADER_VALUE = "header value"
    PARAMETER_NAME = "parameter name"
    PARAMETER_VALUE = "parameter value"
    ADDRESS = "address"


class ParseState(Enum):
    START = "start"
    SPLIT_NAME_VALUE = "split_name_value"
    VALIDATE_NAME = "validate_name"
    UNFOLD = "unfold"
    FIELD_SPECIFIC_PARSE = "field_specific_parse"
    DECODE_DISPLAY_NAMES = "decode_display_names"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class HeaderValue:
    field_name: str
    field_value: str  # valor lógico: decodificado y desplegado


@dataclass(frozen=True)
class EncodedWord:
    charset: str
    encoding: str
    payload: str

    def __str__(self) -> str:
        return f"=?{self.charset}?{self.encoding}?{self.payload}?="
