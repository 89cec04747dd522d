import dataclasses
import pytest

from beastbound.core.errors import UnknownMove, UnknownSpecies, CatalogError
from beastbound.data.catalog import (get_move, get_species, starters, wild_pool,
                                     validate_catalog)


def test_move_lookup():
    m = get_move("GlowPeck")
    assert m.name == "Glow Peck"
    assert m.power == 16
    assert m.kind == "attack"
    assert m.accuracy == pytest.approx(0.95)
    assert get_move("MoonMend").kind == "heal"


def test_unknown_keys_fail_hard():
    with pytest.raises(UnknownMove):
        get_move("Splash")
    with pytest.raises(UnknownSpecies) as info:
        get_species("missingno")
    assert info.value.species_id == "missingno"
    # still catchable as plain lookups / catalog problems
    with pytest.raises(KeyError):
        get_species("missingno")
    with pytest.raises(CatalogError):
        get_move("Splash")


def test_species_templates_are_immutable():
    sp = get_species("torraclaw")
    assert sp.base_hp == 68
    assert sp.move_keys == ("TideSnap", "PebbleToss")
    with pytest.raises(dataclasses.FrozenInstanceError):
        sp.base_hp = 1


def test_pools_and_validation():
    assert starters() == ("glimfer", "torraclaw", "fyreel")
    assert wild_pool() == ("sprigbit", "emberpup", "pebblit")
    validate_catalog()
    for sid in starters() + wild_pool():
        for mk in get_species(sid).move_keys:
            assert 0.0 <= get_move(mk).accuracy <= 1.0
