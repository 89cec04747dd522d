import json
import pytest

from beastbound.core.errors import SaveFormatError
from beastbound.system.save import STORAGE_KEY, SaveStore, validate_blob
from tests.helpers import beast


def sample_blob():
    return {
        "state": "map",
        "player": {"x": 5, "y": 6, "party": [beast().to_dict()]},
        "wild": None,
        "battle": None,
    }


def test_path_uses_storage_key(tmp_path):
    store = SaveStore(tmp_path)
    assert STORAGE_KEY == "bb_save_mobile"
    assert store.path == tmp_path / "bb_save_mobile.json"


def test_write_then_read(tmp_path):
    store = SaveStore(tmp_path / "nested")
    store.write(sample_blob())
    assert store.exists()
    assert store.read() == sample_blob()
    assert not store.path.with_suffix(".tmp").exists()


def test_missing_save_reads_none(tmp_path):
    assert SaveStore(tmp_path).read() is None


def test_corrupt_json_reads_none(tmp_path):
    store = SaveStore(tmp_path)
    store.path.write_text("{not json", encoding="utf-8")
    assert store.read() is None


def test_schema_violation_reads_none(tmp_path):
    store = SaveStore(tmp_path)
    blob = sample_blob()
    blob["state"] = "shopping"
    store.path.write_text(json.dumps(blob), encoding="utf-8")
    assert store.read() is None


def test_validate_blob_rejects_oversized_party():
    blob = sample_blob()
    blob["player"]["party"] = [beast().to_dict() for _ in range(7)]
    with pytest.raises(SaveFormatError):
        validate_blob(blob)


def test_validate_blob_accepts_battle_section():
    blob = sample_blob()
    blob["state"] = "battle"
    foe = beast(name="Sprigbit", moves=("LeafFlick",)).to_dict()
    blob["wild"] = foe
    blob["battle"] = {"player": beast().to_dict(), "foe": foe, "turn": "enemy", "wild": True}
    assert validate_blob(blob) is blob


def test_clear(tmp_path):
    store = SaveStore(tmp_path)
    assert not store.clear()
    store.write(sample_blob())
    assert store.clear()
    assert not store.exists()
