# domain/headers/loader.py
from __future__ import annotations
import logging

from domain.headers.content_type import ContentType
from domain.headers.generic_header import GenericHeader
from domain.headers.header_interface import HeaderInterface
from domain.headers.sender import Sender

logger = logging.getLogger(__name__)


class HeaderLoader:
    """Nombre de campo (sin distinguir mayúsculas) → clase de cabecera; GenericHeader por defecto."""

    def __init__(self) -> None:
        self._classes: dict[str, type[HeaderInterface]] = {
            "content-type": ContentType,
            "sender": Sender,
        }

    def register(self, name: str, header_class: type[HeaderInterface]) -> None:
        self._classes[name.lower()] = header_class

    def get(self, name: str) -> type[HeaderInterface]:
        return self._classes.get(name.strip().lower(), GenericHeader)

    def load(self, header_line: str) -> HeaderInterface:
        name = header_line.partition(":")[0] if isinstance(header_line, str) else ""
        header_class = self.get(name)
        logger.debug("Cargando cabecera con %s", header_class.__name__)
        return header_class.from_string(header_line)
