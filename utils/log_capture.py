# utils/log_capture.py

from __future__ import annotations
import logging
from collections import Counter
from typing import Iterable

class HeaderRunLogCapture(logging.Handler):
    """
    Handler temporal colgado del logger raíz mientras se analiza un fichero.
    Guarda las líneas formateadas (para el informe) y cuenta registros por nivel.
    Con `loggers` solo se quedan los registros de esos prefijos de logger.
    Uso:
        with HeaderRunLogCapture(loggers=("domain", "application")) as cap:
            ... # parsear un bloque de cabeceras
        cap.text(), cap.level_counts()
    """
    def __init__(self, level: int = logging.INFO, *, loggers: Iterable[str] = ()) -> None:
        super().__init__(level)
        self.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        self.lines: list[str] = []
        self.counts: Counter[str] = Counter()
        self._prefixes = tuple(loggers)
        self._prev_level: int | None = None

    def _wanted(self, name: str) -> bool:
        if not self._prefixes:
            return True
        return any(name == p or name.startswith(p + ".") for p in self._prefixes)

    def emit(self, record: logging.LogRecord) -> None:
        if not self._wanted(record.name):
            return
        self.lines.append(self.format(record))
        self.counts[record.levelname] += 1

    def __enter__(self) -> "HeaderRunLogCapture":
        root = logging.getLogger()
        self._prev_level = root.level
        # el root tiene que dejar pasar el nivel de captura
        if not root.level or root.level > self.level:
            root.setLevel(self.level)
        root.addHandler(self)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        root = logging.getLogger()
        root.removeHandler(self)
        if self._prev_level is not None:
            root.setLevel(self._prev_level)
        self.close()

    def text(self) -> str:
        return "\n".join(self.lines)

    def level_counts(self) -> dict[str, int]:
        return dict(self.counts)
