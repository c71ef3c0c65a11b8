# application/services/header_payload.py
from __future__ import annotations
from typing import Any

from domain.headers.content_type import ContentType
from domain.headers.header_interface import HeaderInterface
from domain.headers.sender import Sender


def header_to_payload(header: HeaderInterface) -> dict[str, Any]:
    """
    Descripción JSON de una cabecera ya parseada:
      - name / value (lógico, decodificado) / encoding / wire (serialización)
      - Content-Type: type + parameters
      - Sender: email + display_name
    """
    payload: dict[str, Any] = {
        "name": header.get_field_name(),
        "value": header.get_field_value(),
        "encoding": header.get_encoding(),
        "wire": header.to_string(),
    }
    if isinstance(header, ContentType):
        payload["type"] = header.get_type()
        payload["parameters"] = header.get_parameters()
    elif isinstance(header, Sender):
        address = header.get_address()
        payload["email"] = address.email if address else ""
        payload["display_name"] = (address.name or "") if address else ""
    return payload
