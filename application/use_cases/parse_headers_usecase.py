# application/use_cases/parse_headers_usecase.py
from __future__ import annotations
import fnmatch
import logging
from typing import Any, Literal

from application.services.header_block import split_header_block
from application.services.header_payload import header_to_payload
from domain.exceptions import InvalidArgumentException
from domain.headers.loader import HeaderLoader

logger = logging.getLogger(__name__)

Outcome = Literal["processed", "not_processed", "error"]


class ParseHeadersUseCase:
    def __init__(
        self,
        *,
        allowed_names: list[str] | None = None,
        stop_on_error: bool = False,
        loader: HeaderLoader | None = None,
    ) -> None:
        self.allowed_names = allowed_names or []
        self.stop_on_error = stop_on_error
        self.loader = loader or HeaderLoader()

    def _name_ok(self, name: str) -> bool:
        if not self.allowed_names:
            return True
        n = name.strip().lower()
        return any(fnmatch.fnmatch(n, pat.lower()) for pat in self.allowed_names)

    def process_block(self, raw: str) -> dict[str, Any]:
        """
        Devuelve: {
            "outcome": "processed" | "not_processed" | "error",
            "headers": [ {name, value, encoding, wire, ...}, ... ],   # una por cabecera válida
            "errors":  [ {line, kind, message}, ... ]                 # line = nº de cabecera (1..n)
        }
        """
        try:
            lines = split_header_block(raw)
        except InvalidArgumentException as exc:
            logger.error("Bloque de cabeceras inválido: %s", exc)
            return {"outcome": "error", "headers": [], "errors": [_error_entry(0, exc)]}

        # 1) Filtrar por nombre de campo (si configurado)
        selected = [(n, line) for n, line in enumerate(lines, start=1) if self._name_ok(line.partition(":")[0])]
        if not selected:
            logger.info("Not processed (ninguna cabecera seleccionada de %d).", len(lines))
            return {"outcome": "not_processed", "headers": [], "errors": []}

        # 2) Parsear cada cabecera; los errores se registran y (opcionalmente) cortan el bloque
        headers: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []
        for n, line in selected:
            try:
                header = self.loader.load(line)
            except InvalidArgumentException as exc:
                logger.error("Cabecera %d rechazada (%s): %s", n, _kind_label(exc), exc)
                errors.append(_error_entry(n, exc))
                if self.stop_on_error:
                    break
                continue
            headers.append(header_to_payload(header))
            logger.info("Cabecera %d OK: %s", n, header.get_field_name())

        return {"outcome": "error" if errors else "processed", "headers": headers, "errors": errors}


def _kind_label(exc: InvalidArgumentException) -> str:
    return exc.kind.value if exc.kind else "invalid"


def _error_entry(line: int, exc: InvalidArgumentException) -> dict[str, Any]:
    return {"line": line, "kind": _kind_label(exc), "message": str(exc)}
