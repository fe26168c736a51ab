from pathlib import Path

from swordmerge.config import DATA_DIR_ENV, Settings
from swordmerge.persistence.storage import default_data_dir


def test_defaults_from_packaged_yaml(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    settings = Settings.load()
    assert settings.save_filename == "save.json"
    assert settings.autosave is True
    assert settings.starting_currency == 100
    assert settings.rng_seed is None
    assert settings.resolved_data_dir() == default_data_dir()


def test_user_file_overrides_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    user = tmp_path / "settings.yaml"
    user.write_text(
        f"data_dir: {tmp_path / 'data'}\nautosave: false\nrng_seed: 7\nunknown_key: 1\n",
        encoding="utf-8",
    )
    settings = Settings.load(user_path=user)
    assert settings.autosave is False
    assert settings.rng_seed == 7
    assert settings.starting_currency == 100
    assert settings.resolved_data_dir() == tmp_path / "data"


def test_missing_user_file_keeps_defaults(tmp_path: Path):
    settings = Settings.load(user_path=tmp_path / "nope.yaml")
    assert settings == Settings.load()


def test_env_overrides_data_dir(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "env"))
    settings = Settings(data_dir=tmp_path / "configured")
    assert settings.resolved_data_dir() == tmp_path / "env"


def test_deep_merge_overlays_nested_mappings():
    base = {"autosave": True, "nested": {"a": 1, "b": 2}}
    overlay = {"nested": {"b": 3}, "rng_seed": 4}
    merged = Settings._deep_merge(base, overlay)
    assert merged == {"autosave": True, "nested": {"a": 1, "b": 3}, "rng_seed": 4}
    assert base["nested"] == {"a": 1, "b": 2}
