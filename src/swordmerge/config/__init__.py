from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from ..persistence.storage import DEFAULT_SAVE_FILENAME, default_data_dir

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "SWORDMERGE_DATA_DIR"


@dataclass
class Settings:
    data_dir: Optional[Path] = None
    save_filename: str = DEFAULT_SAVE_FILENAME
    autosave: bool = True
    starting_currency: int = 100
    rng_seed: Optional[int] = None

    def resolved_data_dir(self) -> Path:
        """Data directory, in order: env override, configured path, platform default."""
        env_dir = os.environ.get(DATA_DIR_ENV)
        if env_dir:
            return Path(env_dir)
        if self.data_dir is not None:
            return Path(self.data_dir)
        return default_data_dir()

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings keys: %s", unknown)
        values = {k: v for k, v in data.items() if k in known}
        if values.get("data_dir") is not None:
            values["data_dir"] = Path(values["data_dir"]).expanduser()
        return cls(**values)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and an optional user override file."""
        try:
            with resources.files("swordmerge.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        settings = cls._from_dict(cls._deep_merge(default_data, user_data))
        logger.debug("Settings loaded: %s", settings)
        return settings
