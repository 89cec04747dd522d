"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class BeastboundError(Exception):
    pass

class DataLoadError(BeastboundError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class CatalogError(BeastboundError):
    pass

class UnknownSpecies(CatalogError, KeyError):
    def __init__(self, species_id: str):
        super().__init__(f"Unknown species '{species_id}'")
        self.species_id = species_id

    def __str__(self) -> str:
        return self.args[0]

class UnknownMove(CatalogError, KeyError):
    def __init__(self, move_key: str):
        super().__init__(f"Unknown move '{move_key}'")
        self.move_key = move_key

    def __str__(self) -> str:
        return self.args[0]

class SaveFormatError(BeastboundError):
    pass
