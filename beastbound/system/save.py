"""Single-blob save storage.

The whole game lives in one JSON document under a fixed storage key:

    { "state": ..., "player": {"x", "y", "party"}, "wild": ..., "battle": ... }

Reading never raises: a missing, unreadable or malformed blob is reported as
``None`` so the caller can start a fresh game.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

from beastbound.core.errors import SaveFormatError
from beastbound.core.logging import logger
from beastbound.core.paths import SCHEMA

STORAGE_KEY = "bb_save_mobile"

@lru_cache(maxsize=None)
def _schema() -> Dict[str, Any]:
    return json.loads((SCHEMA / "save.schema.json").read_text(encoding="utf-8"))

def validate_blob(data: Any) -> Dict[str, Any]:
    try:
        jsonschema.validate(data, _schema())
    except jsonschema.ValidationError as e:
        raise SaveFormatError(e.message) from e
    return data

class SaveStore:
    def __init__(self, directory: Path, key: str = STORAGE_KEY):
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def exists(self) -> bool:
        return self.path.is_file()

    def write(self, data: Dict[str, Any]) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self.path)
        logger.debug("GameSaved", path=str(self.path))
        return self.path

    def read(self) -> Optional[Dict[str, Any]]:
        if not self.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return validate_blob(raw)
        except (OSError, ValueError, SaveFormatError) as e:
            logger.warn("SaveLoadFailed", path=str(self.path), error=str(e))
            return None

    def clear(self) -> bool:
        if self.exists():
            self.path.unlink()
            logger.info("SaveDeleted", path=str(self.path))
            return True
        return False

__all__ = ["SaveStore", "STORAGE_KEY", "validate_blob"]
