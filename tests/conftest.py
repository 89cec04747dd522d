# Ensure project root is on sys.path for tests
import sys, pathlib
import pytest

root = pathlib.Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from beastbound.system.settings import Settings, SettingsData


@pytest.fixture
def settings(tmp_path):
    data = SettingsData(save_dir=str(tmp_path / "saves"))
    return Settings(data, tmp_path / "settings.json")


@pytest.fixture(autouse=True)
def _no_seed_env(monkeypatch):
    monkeypatch.delenv("BEASTBOUND_RNG_SEED", raising=False)
