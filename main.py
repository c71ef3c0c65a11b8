# main.py
# Punto de entrada: ficheros de cabeceras -> parseo/validación -> informe por fichero
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from config.settings import Settings
from interface_adapters.controllers.inspect_controller import InspectController

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    parser = argparse.ArgumentParser(description="Valida y normaliza cabeceras Content-Type / Sender.")
    parser.add_argument("paths", nargs="+", type=Path, help="ficheros .eml o volcados de cabeceras")
    args = parser.parse_args(argv)

    logger.info("=== Header Inspector ===")
    controller = InspectController(settings=settings)
    outcomes = controller.run(args.paths)
    failed = [p for p, outcome in outcomes.items() if outcome != "processed"]
    if failed:
        logger.warning("%d de %d ficheros con incidencias", len(failed), len(outcomes))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
