# domain/exceptions.py
from __future__ import annotations

from domain.models import ErrorKind


class MailException(Exception):
    """Base de todos los errores de la librería de cabeceras."""


class InvalidArgumentException(MailException, ValueError):
    """
    Un valor no supera la validación (nombre/valor de cabecera, parámetro, dirección).
    `kind` indica la categoría violada; el mensaje nunca repite la entrada.
    """
    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind
