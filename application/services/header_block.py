# application/services/header_block.py
from __future__ import annotations
import re

from domain.headers.exceptions import InvalidArgumentException
from domain.models import ErrorKind

CONTINUATION_PREFIXES = (" ", "\t")

_LINE_END_RE = re.compile(r"\r\n|\n")


def split_header_block(raw: str) -> list[str]:
    """
    Trocea una sección de cabeceras (tal como viene de un fichero, con CRLF o LF) en
    líneas lógicas, cada una con sus plegados en CRLF + espacio.
    - Se para en la primera línea vacía (fin de cabeceras).
    - Una continuación sin cabecera previa → error de valor de cabecera.
    - Un CR suelto dentro de una línea se deja tal cual: el validador lo rechazará.
    """
    headers: list[str] = []
    for line in _LINE_END_RE.split(raw):
        if line == "":
            break
        if line.startswith(CONTINUATION_PREFIXES):
            if not headers:
                raise InvalidArgumentException(
                    "Invalid header value detected: continuation line without header",
                    kind=ErrorKind.HEADER_VALUE,
                )
            headers[-1] += "\r\n" + line
            continue
        headers.append(line)
    return headers
