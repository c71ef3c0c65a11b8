# domain/headers/content_type.py
from __future__ import annotations
from typing import Any

from domain import encoded_word, grammar
from domain.folding import fold
from domain.headers.exceptions import InvalidArgumentException
from domain.headers.header_interface import FORMAT_ENCODED, FORMAT_RAW, HeaderInterface
from domain.models import ErrorKind


def _split_segments(value: str) -> list[str]:
    """Parte por `;` respetando las cadenas entre comillas (y sus `\\x`)."""
    segments: list[str] = []
    buf: list[str] = []
    in_quotes = escaped = False
    for ch in value:
        if escaped:
            escaped = False
        elif in_quotes and ch == "\\":
            escaped = True
        elif ch == '"':
            in_quotes = not in_quotes
        elif ch == ";" and not in_quotes:
            segments.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    segments.append("".join(buf))
    return segments


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        inner = value[1:-1]
        out: list[str] = []
        it = iter(inner)
        for ch in it:
            out.append(next(it, "") if ch == "\\" else ch)
        return "".join(out)
    return value


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ContentType(HeaderInterface):
    FIELD_NAME = "Content-Type"

    def __init__(self) -> None:
        self._type: str = ""
        # lista ordenada (nombre tal cual, valor) + índice por nombre en minúsculas
        self._parameters: list[tuple[str, str]] = []
        self._index: dict[str, int] = {}

    # ───────── parseo ─────────
    @classmethod
    def _parse_field_value(cls, value: str) -> dict[str, Any]:
        segments = _split_segments(value)
        params: list[tuple[str, str]] = []
        for segment in segments[1:]:
            segment = segment.strip()
            if not segment:
                continue  # `;` final (o doble) → se ignora
            key, sep, raw = segment.partition("=")
            if not sep:
                raise InvalidArgumentException(
                    "Invalid parameter value detected: expected name=value", kind=ErrorKind.PARAMETER_VALUE
                )
            params.append((key.strip(), _unquote(raw.strip())))
        return {"type": segments[0].strip(), "parameters": params}

    @classmethod
    def _decode_parsed(cls, parsed: dict[str, Any]) -> dict[str, Any]:
        parsed["parameters"] = [(k, encoded_word.decode_value(v)) for k, v in parsed["parameters"]]
        return parsed

    @classmethod
    def _build(cls, field_name: str, parsed: dict[str, Any]) -> "ContentType":
        header = cls()
        header.set_type(parsed["type"])
        for name, value in parsed["parameters"]:
            header.add_parameter(name, value)
        return header

    # ───────── tipo ─────────
    def set_type(self, value: str) -> "ContentType":
        if not grammar.is_valid_media_type(value):
            raise InvalidArgumentException(
                "Invalid content type detected in header value", kind=ErrorKind.HEADER_VALUE
            )
        self._type = value.lower()
        return self

    def get_type(self) -> str:
        return self._type

    # ───────── parámetros ─────────
    def add_parameter(self, name: str, value: str) -> "ContentType":
        grammar.validate_parameter_name(name)
        grammar.validate_parameter_value(value)
        key = name.lower()
        pos = self._index.get(key)
        if pos is None:
            self._index[key] = len(self._parameters)
            self._parameters.append((name, value))
        else:
            self._parameters[pos] = (name, value)
        return self

    def get_parameters(self) -> dict[str, str]:
        return dict(self._parameters)

    def get_parameter(self, name: str) -> str | None:
        pos = self._index.get(name.lower())
        return None if pos is None else self._parameters[pos][1]

    def remove_parameter(self, name: str) -> bool:
        pos = self._index.pop(name.lower(), None)
        if pos is None:
            return False
        del self._parameters[pos]
        self._index = {k.lower(): i for i, (k, _) in enumerate(self._parameters)}
        return True

    # ───────── serialización ─────────
    def _parameter_parts(self, format: bool) -> list[str]:
        parts = []
        for name, value in self._parameters:
            if format == FORMAT_ENCODED:
                value, _ = encoded_word.encode(value)
            parts.append(f"{name}={_quote(value)}")
        return parts

    def get_field_value(self, format: bool = FORMAT_RAW) -> str:
        if not self._type:
            return ""
        return "; ".join([self._type, *self._parameter_parts(format)])

    def get_encoding(self) -> str:
        if any(encoded_word.detect_encoding(v) != encoded_word.ASCII for _, v in self._parameters):
            return encoded_word.UTF8
        return encoded_word.ASCII

    def to_string(self) -> str:
        if not self._type:
            return f"{self.FIELD_NAME}: "
        return f"{self.FIELD_NAME}: " + fold(self._type, self._parameter_parts(FORMAT_ENCODED))
