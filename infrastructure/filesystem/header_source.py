# infrastructure/filesystem/header_source.py
from __future__ import annotations
import re
from pathlib import Path

_BLANK_LINE_RE = re.compile(r"\r?\n\r?\n")


def read_header_section(path: Path, encoding: str = "latin-1") -> str:
    """
    Lee un fichero (.eml o volcado de cabeceras) y devuelve solo la sección de cabeceras,
    es decir, hasta la primera línea vacía. Con latin-1 los octetos de 8 bits llegan
    intactos al validador (que los rechaza si no van codificados).
    """
    text = path.read_bytes().decode(encoding)
    return _BLANK_LINE_RE.split(text, maxsplit=1)[0]
