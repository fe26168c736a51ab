from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import PersistenceError
from .codec import decode, fresh_state, snapshot
from .models import STARTING_CURRENCY, GameState
from .storage import DEFAULT_SAVE_FILENAME, SaveStorage

logger = logging.getLogger(__name__)


class SaveManager:
    """Reads and writes engine snapshots.

    Faults never escape: a failed save reports ``False`` and a failed load
    yields a fresh state, so the engine never runs on a partially valid
    snapshot.
    """

    def __init__(
        self,
        storage: Optional[SaveStorage] = None,
        *,
        root: Optional[Path] = None,
        filename: str = DEFAULT_SAVE_FILENAME,
        starting_currency: float = STARTING_CURRENCY,
    ) -> None:
        self.storage = storage or SaveStorage(root, filename)
        self.starting_currency = starting_currency

    @property
    def save_path(self) -> Path:
        return self.storage.save_path

    def save_game(self, state: GameState) -> bool:
        try:
            state.touch()
            self.storage.write(snapshot(state))
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save game to %s: %s", self.save_path, exc)
            return False
        logger.debug("Game saved to %s", self.save_path)
        return True

    def load_game(self) -> GameState:
        try:
            text = self.storage.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read save %s: %s", self.save_path, exc)
            return self._fresh()
        if text is None:
            logger.info("No save file found; starting a new game")
            return self._fresh()
        try:
            state = decode(text)
        except PersistenceError as exc:
            logger.warning("Discarding unusable save %s: %s", self.save_path, exc)
            return self._fresh()
        logger.info("Loaded saved game from %s", self.save_path)
        return state

    def clear_save(self) -> None:
        try:
            self.storage.delete()
        except OSError as exc:
            logger.error("Failed to clear save %s: %s", self.save_path, exc)

    def _fresh(self) -> GameState:
        return fresh_state(self.starting_currency)
