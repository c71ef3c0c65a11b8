# config/settings.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import logging
import os
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Lectura de ficheros de cabeceras
    # latin-1: cualquier octeto se decodifica y el validador decide (8 bits sin codificar → inválido)
    HEADER_INPUT_ENCODING: str = os.getenv("HEADER_INPUT_ENCODING", "latin-1")

    # Filtros / comportamiento
    HEADER_ALLOWED_NAMES: str = os.getenv("HEADER_ALLOWED_NAMES", "")  # p.ej.: Content-Type,Sender,X-*
    HEADER_STOP_ON_ERROR: bool = os.getenv("HEADER_STOP_ON_ERROR", "false").lower() == "true"

    # Informes
    REPORT_ENABLED: bool = os.getenv("REPORT_ENABLED", "true").lower() == "true"
    REPORT_DIR: str = os.getenv("REPORT_DIR", "./_reports")

    # ───────── helpers ─────────
    def allowed_names(self) -> list[str]:
        raw = (self.HEADER_ALLOWED_NAMES or "").strip()
        return [s.strip() for s in raw.split(",") if s.strip()]

    def report_dir_path(self) -> Path:
        return Path(self.REPORT_DIR).resolve()

    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO
