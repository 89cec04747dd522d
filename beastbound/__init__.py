"""Beastbound: Verdant Shards. A turn-based creature-battling game engine."""
__version__ = "0.1.0"
