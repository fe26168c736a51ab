"""Persistence subsystem for swordmerge.

This package provides:
- GameState / GameStats data models mirroring the snapshot layout
- A strict schema that accepts or rejects a snapshot as a whole
- snapshot / restore / validate / fresh_state codec helpers
- Atomic single-file storage and a SaveManager that falls back to a fresh state
"""

from .codec import decode, fresh_state, restore, snapshot, validate
from .manager import SaveManager
from .models import CURRENT_VERSION, STARTING_CURRENCY, SUPPORTED_VERSIONS, GameState, GameStats
from .storage import SaveStorage, default_data_dir

__all__ = [
    "CURRENT_VERSION",
    "STARTING_CURRENCY",
    "SUPPORTED_VERSIONS",
    "GameState",
    "GameStats",
    "SaveManager",
    "SaveStorage",
    "decode",
    "default_data_dir",
    "fresh_state",
    "restore",
    "snapshot",
    "validate",
]
