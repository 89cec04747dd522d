"""
Centralized path helpers.
"""
from __future__ import annotations
from pathlib import Path

# This file lives at beastbound/core/paths.py
PACKAGE = Path(__file__).resolve().parents[1]
ASSETS = PACKAGE / "assets"
CATALOG = ASSETS / "catalog"
SCHEMA = ASSETS / "schema"
