# domain/grammar.py
# Comprobaciones de gramática: nombres/valores de cabecera, parámetros y encoded-words
from __future__ import annotations
import re

from domain.headers.exceptions import InvalidArgumentException
from domain.models import ErrorKind

TSPECIALS = frozenset('()<>@,;:\\"/[]?=')

_TOKEN = r"[!#$%&'*+\-.^_`{|}~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"{_TOKEN}/{_TOKEN}")
ENCODED_WORD_RE = re.compile(r"=\?(?P<charset>[^?\s]+)\?(?P<encoding>[QqBb])\?(?P<payload>[^?\s]*)\?=")


def is_valid_header_name(name: str) -> bool:
    if not isinstance(name, str) or not name:
        return False
    return all(32 < ord(ch) < 127 and ch != ":" for ch in name)


def is_valid_field_value(value: str) -> bool:
    """
    Un CR solo es válido como inicio de plegado: CR LF seguido de SP o HTAB.
    LF suelto, CR suelto, CRLF al final, NUL o caracteres de 8 bits → inválido.
    """
    total = len(value)
    i = 0
    while i < total:
        code = ord(value[i])
        if code in (0, 10) or code > 127:
            return False
        if code == 13:
            if i + 2 >= total:
                return False
            if value[i + 1] != "\n" or value[i + 2] not in (" ", "\t"):
                return False
            i += 2  # saltamos LF + espacio del plegado
        i += 1
    return True


def is_valid_parameter_name(name: str) -> bool:
    if not isinstance(name, str) or not name:
        return False
    return all(32 < ord(ch) < 127 and ch not in TSPECIALS for ch in name)


def is_valid_parameter_value(value: str) -> bool:
    if not isinstance(value, str):
        return False
    for ch in value:
        code = ord(ch)
        if (code < 32 and ch != "\t") or code == 127:
            return False
    return True


def is_valid_media_type(value: str) -> bool:
    return isinstance(value, str) and _MEDIA_TYPE_RE.fullmatch(value) is not None


def is_encoded_word(token: str) -> bool:
    return ENCODED_WORD_RE.fullmatch(token) is not None


def contains_crlf(value: str) -> bool:
    return "\r" in value or "\n" in value


# ───────── validaciones (lanzan excepción) ─────────
def validate_header_name(name: str) -> None:
    if not is_valid_header_name(name):
        raise InvalidArgumentException("Invalid header name detected", kind=ErrorKind.HEADER_NAME)


def validate_field_value(value: str) -> None:
    if not isinstance(value, str) or not is_valid_field_value(value):
        raise InvalidArgumentException("Invalid header value detected", kind=ErrorKind.HEADER_VALUE)


def validate_parameter_name(name: str) -> None:
    if not is_valid_parameter_name(name):
        raise InvalidArgumentException("Invalid parameter name detected", kind=ErrorKind.PARAMETER_NAME)


def validate_parameter_value(value: str) -> None:
    if not is_valid_parameter_value(value):
        raise InvalidArgumentException("Invalid parameter value detected", kind=ErrorKind.PARAMETER_VALUE)


def assert_no_crlf(value: str, kind: ErrorKind, message: str | None = None) -> None:
    if contains_crlf(value):
        raise InvalidArgumentException(message or f"Invalid {kind.value} detected", kind=kind)
