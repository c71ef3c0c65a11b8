# domain/address.py
from __future__ import annotations
import re
from dataclasses import dataclass

from domain import encoded_word
from domain.exceptions import InvalidArgumentException
from domain.grammar import contains_crlf
from domain.models import ErrorKind

_ATOM = r"[A-Za-z0-9_-]+"
_EMAIL_RE = re.compile(rf"{_ATOM}(?:\.{_ATOM})*@{_ATOM}(?:\.{_ATOM})*")
_ADDRESS_RE = re.compile(r"(?P<name>.*?)<(?P<email>[^>]+)>")
_SPECIALS = frozenset('()<>[]:;@\\,."')
_QUOTED_PAIR_RE = re.compile(r"\\(.)")


def split_address(value: str) -> tuple[str, str | None, bool]:
    """
    Separa `Nombre <email>` en (email, nombre, nombre_entre_comillas).
    - Sin `<...>` el valor entero se trata como email (Address decide si es válido).
    - Un nombre entre comillas vuelve ya des-escapado; los demás siguen codificados.
    """
    m = _ADDRESS_RE.fullmatch(value.strip())
    if not m:
        return value.strip(), None, False
    name = m["name"].strip()
    quoted = len(name) >= 2 and name[0] == name[-1] == '"'
    if quoted:
        name = _QUOTED_PAIR_RE.sub(r"\1", name[1:-1])
    return m["email"], name or None, quoted


@dataclass(frozen=True)
class Address:
    """
    Dirección de correo + nombre visible opcional. Inmutable: una cabecera y quien la
    construyó pueden compartir la misma instancia sin riesgo.
    """
    email: str
    name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.email, str) or not _EMAIL_RE.fullmatch(self.email):
            raise InvalidArgumentException("Invalid email address", kind=ErrorKind.ADDRESS)
        if self.name is None:
            return
        if not isinstance(self.name, str) or contains_crlf(self.name):
            raise InvalidArgumentException("Invalid address name: CRLF injection detected", kind=ErrorKind.ADDRESS)
        if not self.name.strip():
            object.__setattr__(self, "name", None)

    @classmethod
    def from_string(cls, value: str) -> "Address":
        """Acepta `Nombre <email>`, `<email>` o el email a secas."""
        email, name, quoted = split_address(value)
        if name and not quoted:
            name = encoded_word.decode_value(name)
        return cls(email, name)

    def get_encoding(self) -> str:
        return encoded_word.detect_encoding(self.name or "")

    def format(self) -> str:
        if not self.name:
            return f"<{self.email}>"
        name, label = encoded_word.encode(self.name)
        if label == encoded_word.ASCII and any(ch in _SPECIALS for ch in name):
            escaped = name.replace("\\", "\\\\").replace('"', '\\"')
            name = f'"{escaped}"'
        return f"{name} <{self.email}>"

    def __str__(self) -> str:
        return self.format()
