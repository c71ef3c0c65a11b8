# domain/headers/exceptions.py
from __future__ import annotations

from domain import exceptions


class InvalidArgumentException(exceptions.InvalidArgumentException):
    """Errores de parseo/serialización de cabeceras (subclase del error general de la librería)."""
