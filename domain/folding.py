# domain/folding.py
from __future__ import annotations
import re
from typing import Iterable

FOLDING = "\r\n "

_FOLD_RE = re.compile(r"\r\n[ \t]")


def unfold(raw: str) -> str:
    """
    Cada plegado (CRLF + un SP/HTAB) pasa a ser un único espacio.
    El resto de espacios de cada línea física se conserva tal cual.
    """
    if "\r\n" not in raw:
        return raw
    return _FOLD_RE.sub(" ", raw)


def fold(primary: str, parts: Iterable[str], separator: str = ";") -> str:
    # una parte por línea de continuación, sin mirar la longitud de línea
    return primary + "".join(f"{separator}{FOLDING}{part}" for part in parts)
