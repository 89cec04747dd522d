import json
from pathlib import Path

from beastbound.core.logging import logger
from beastbound.system.settings import Settings, SettingsData


def test_defaults_when_file_missing(tmp_path):
    s = Settings.load(tmp_path / "nope.json")
    assert s.data == SettingsData()
    assert s.data.enemy_turn_delay_ms == 250
    assert s.enemy_delay_s == 0.25
    assert s.data.autosave is True


def test_backfills_missing_and_ignores_unknown_fields(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": "DEBUG", "volume": 11}))
    s = Settings.load(path)
    assert s.data.log_level == "DEBUG"
    assert s.data.autosave is True


def test_normalize_repairs_bad_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": "LOUD", "enemy_turn_delay_ms": -40, "rng_seed": "7"}))
    s = Settings.load(path)
    assert s.data.log_level == "INFO"
    assert s.data.enemy_turn_delay_ms == 0
    assert s.data.rng_seed == 7


def test_unparseable_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2")
    assert Settings.load(path).data == SettingsData()
    path.write_text("[1, 2]")
    assert Settings.load(path).data == SettingsData()


def test_save_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    s = Settings.load(path)
    s.data.enemy_turn_delay_ms = 0
    s.save()
    assert path.exists()
    assert Settings.load(path).data.enemy_turn_delay_ms == 0


def test_env_seed_wins(tmp_path, monkeypatch):
    s = Settings(SettingsData(rng_seed=3), tmp_path / "s.json")
    assert s.resolve_seed() == 3
    monkeypatch.setenv("BEASTBOUND_RNG_SEED", "99")
    assert s.resolve_seed() == 99
    monkeypatch.setenv("BEASTBOUND_RNG_SEED", "abc")
    assert s.resolve_seed() == 3


def test_save_dir(tmp_path):
    assert Settings(SettingsData(save_dir=str(tmp_path)), tmp_path / "s.json").save_dir() == tmp_path
    default = Settings(SettingsData(), tmp_path / "s.json").save_dir()
    assert default == Path.home() / ".beastbound"


def test_apply_log_level(tmp_path):
    s = Settings(SettingsData(log_level="ERROR"), tmp_path / "s.json")
    try:
        s.apply_log_level()
        assert not logger.enabled("WARN")
        s.data.debug = True
        s.apply_log_level()
        assert logger.enabled("DEBUG")
    finally:
        logger.set_level("INFO")
