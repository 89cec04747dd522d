"""Runtime loader for the static move / species catalog.

The catalog ships as JSON under ``beastbound/assets/catalog`` and is validated
against the schemas in ``beastbound/assets/schema`` the first time it is read.
Everything returned from here is immutable; callers copy what they mutate.
"""
from __future__ import annotations
import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any, Literal, Tuple

import jsonschema

from beastbound.core.errors import DataLoadError, CatalogError, UnknownMove, UnknownSpecies
from beastbound.core.logging import logger
from beastbound.core.paths import CATALOG, SCHEMA

MoveKind = Literal["attack", "heal"]

@dataclass(frozen=True)
class Move:
    key: str
    name: str
    power: int
    kind: MoveKind
    accuracy: float

@dataclass(frozen=True)
class SpeciesTemplate:
    key: str
    name: str
    base_hp: int
    move_keys: Tuple[str, ...]
    color: str


def _read_validated(path: Path, schema_name: str) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise DataLoadError(str(path), str(e)) from e
    schema = json.loads((SCHEMA / schema_name).read_text(encoding="utf-8"))
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(str(path), f"schema: {e.message}") from e
    logger.debug("CatalogLoaded", file=path.name, entries=len(data))
    return data

@lru_cache(maxsize=None)
def _moves() -> Dict[str, Move]:
    raw = _read_validated(CATALOG / "moves.json", "moves.schema.json")
    return {
        key: Move(key=key, name=m["name"], power=int(m["power"]), kind=m["kind"], accuracy=float(m["accuracy"]))
        for key, m in raw.items()
    }

@lru_cache(maxsize=None)
def _species_doc() -> Dict[str, Any]:
    return _read_validated(CATALOG / "species.json", "species.schema.json")

@lru_cache(maxsize=None)
def _species() -> Dict[str, SpeciesTemplate]:
    doc = _species_doc()
    return {
        key: SpeciesTemplate(key=key, name=s["name"], base_hp=int(s["base_hp"]),
                             move_keys=tuple(s["moves"]), color=s["color"])
        for key, s in doc["species"].items()
    }

def get_move(key: str) -> Move:
    try:
        return _moves()[key]
    except KeyError:
        raise UnknownMove(key) from None

def get_species(species_id: str) -> SpeciesTemplate:
    try:
        return _species()[species_id]
    except KeyError:
        raise UnknownSpecies(species_id) from None

def starters() -> Tuple[str, ...]:
    return tuple(_species_doc()["starters"])

def wild_pool() -> Tuple[str, ...]:
    return tuple(_species_doc()["wild_pool"])

def validate_catalog() -> None:
    """Cross-check references the schemas cannot express.

    Every species move must exist and every starter / wild pool entry must be
    a known species. Raises CatalogError on the first problem found.
    """
    moves = _moves()
    species = _species()
    for sp in species.values():
        for mk in sp.move_keys:
            if mk not in moves:
                raise CatalogError(f"Species '{sp.key}' references unknown move '{mk}'")
    for group, ids in (("starters", starters()), ("wild_pool", wild_pool())):
        for sid in ids:
            if sid not in species:
                raise CatalogError(f"{group} references unknown species '{sid}'")
    logger.debug("CatalogValidated", moves=len(moves), species=len(species))

__all__ = [
    "Move", "SpeciesTemplate", "MoveKind",
    "get_move", "get_species",
    "starters", "wild_pool", "validate_catalog",
]
