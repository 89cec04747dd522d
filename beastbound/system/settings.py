from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from beastbound.core.logging import logger

SETTINGS_FILENAME = ".beastbound_settings.json"
SEED_ENV = "BEASTBOUND_RNG_SEED"

@dataclass
class SettingsData:
    log_level: str = "INFO"          # DEBUG / INFO / WARN / ERROR
    autosave: bool = True            # Save after every state-affecting change
    enemy_turn_delay_ms: int = 250   # Pause before the foe acts
    rng_seed: Optional[int] = None   # Fixed seed for reproducible runs
    save_dir: Optional[str] = None   # Defaults to ~/.beastbound
    debug: bool = False              # Forces DEBUG logging

    def normalize(self):
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        try:
            self.enemy_turn_delay_ms = max(0, int(self.enemy_turn_delay_ms))
        except (TypeError, ValueError):
            self.enemy_turn_delay_ms = 250
        if self.rng_seed is not None:
            try:
                self.rng_seed = int(self.rng_seed)
            except (TypeError, ValueError):
                self.rng_seed = None

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2))
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def apply_log_level(self):
        lvl = "DEBUG" if self.data.debug else self.data.log_level
        if lvl in {"DEBUG","INFO","WARN","ERROR"}:
            logger.set_level(lvl)  # type: ignore[arg-type]

    def resolve_seed(self) -> Optional[int]:
        """Seed from the environment wins over the settings file."""
        seed = os.environ.get(SEED_ENV)
        if seed:
            try:
                return int(seed)
            except ValueError:
                logger.warn("BadSeedIgnored", value=seed)
        return self.data.rng_seed

    def save_dir(self) -> Path:
        if self.data.save_dir:
            return Path(self.data.save_dir).expanduser()
        return Path(os.path.expanduser("~")) / ".beastbound"

    @property
    def enemy_delay_s(self) -> float:
        return self.data.enemy_turn_delay_ms / 1000.0
