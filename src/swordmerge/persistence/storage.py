from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "SwordMerge"
DEFAULT_SAVE_FILENAME = "save.json"


def default_data_dir() -> Path:
    return Path(user_data_dir(appname=APP_NAME))


class SaveStorage:
    """Filesystem-backed storage for a single save file.

    Writes go to a temporary sibling first and are swapped in with
    ``os.replace`` so readers never observe a half-written file.
    """

    def __init__(self, root: Optional[Path] = None, filename: str = DEFAULT_SAVE_FILENAME) -> None:
        self.root = Path(root) if root is not None else default_data_dir()
        self.save_path = self.root / filename
        self._ensure_dirs()

    def _ensure_dirs(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        return self.save_path.exists()

    def write(self, text: str) -> None:
        """Write the save atomically.

        Raises OSError on failure; the previous save is left in place.
        """
        tmp_path = self.save_path.with_suffix(self.save_path.suffix + ".tmp")
        logger.debug("Writing save to temporary file: %s", tmp_path)
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.save_path)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise
        logger.debug("Atomic save written to %s", self.save_path)

    def read(self) -> Optional[str]:
        """Return the raw save text, or None when no save exists.

        Raises OSError if the file exists but cannot be read, and
        UnicodeDecodeError if it is not UTF-8 text.
        """
        if not self.save_path.exists():
            return None
        with open(self.save_path, "r", encoding="utf-8") as f:
            return f.read()

    def delete(self) -> None:
        if self.save_path.exists():
            self.save_path.unlink()
            logger.info("Save deleted: %s", self.save_path)
