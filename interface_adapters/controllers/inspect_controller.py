# interface_adapters/controllers/inspect_controller.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from application.use_cases.parse_headers_usecase import ParseHeadersUseCase
from config.settings import Settings
from infrastructure.filesystem.header_source import read_header_section
from infrastructure.filesystem.storage import ReportStorage
from utils.log_capture import HeaderRunLogCapture

logger = logging.getLogger(__name__)

# Solo el log de este proyecto va al informe
CAPTURED_LOGGERS = ("domain", "application", "infrastructure", "interface_adapters")

class InspectController:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.reports = ReportStorage(base=settings.report_dir_path()) if settings.REPORT_ENABLED else None
        self.uc = ParseHeadersUseCase(
            allowed_names=settings.allowed_names(),
            stop_on_error=settings.HEADER_STOP_ON_ERROR,
        )

    # ───────────────────────── informes ─────────────────────────
    def _save_report(self, *, path: Path, result: dict[str, Any], cap: HeaderRunLogCapture) -> None:
        if self.reports is None:
            return
        report = {
            "source": str(path),
            "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            **result,
            "log": cap.text(),
            "log_levels": cap.level_counts(),
        }
        try:
            fp = self.reports.save_json(path.name, report)
            logger.info("Informe guardado en %s", fp)
        except OSError:
            logger.exception("No se pudo guardar el informe de %s", path)

    # ───────────────────────── ejecución ─────────────────────────
    def _inspect_file(self, path: Path) -> str:
        with HeaderRunLogCapture(level=self.settings.log_level(), loggers=CAPTURED_LOGGERS) as cap:
            logger.info("=== Analizando cabeceras de %s ===", path)
            try:
                raw = read_header_section(path, encoding=self.settings.HEADER_INPUT_ENCODING)
            except (OSError, LookupError):
                logger.exception("No se pudo leer %s", path)
                result = {"outcome": "error", "headers": [], "errors": []}
            else:
                result = self.uc.process_block(raw)
            outcome = result.get("outcome", "not_processed")
            logger.info("Resultado %s: %s (%d cabeceras, %d errores)",
                        path.name, outcome.upper(), len(result["headers"]), len(result["errors"]))

        self._save_report(path=path, result=result, cap=cap)
        return outcome

    def run(self, paths: Iterable[Path]) -> dict[str, str]:
        outcomes: dict[str, str] = {}
        for path in paths:
            outcomes[str(path)] = self._inspect_file(Path(path))
        if not outcomes:
            logger.info("Sin ficheros que analizar.")
        return outcomes
