# infrastructure/filesystem/storage.py
from __future__ import annotations
import json
import uuid
from pathlib import Path
from typing import Any


class ReportStorage:
    def __init__(self, base: Path) -> None:
        self.base = base.resolve()
        self.base.mkdir(parents=True, exist_ok=True)

    def save_json(self, name_hint: str, payload: dict[str, Any]) -> Path:
        stem = Path(name_hint).stem or "headers"
        fp = self.base / f"{stem}_{uuid.uuid4().hex}.json"
        fp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return fp
