import argparse
import logging
import sys
from pathlib import Path

from .config import Settings
from .engine import GameEngine
from .persistence import SaveManager, codec
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="swordmerge",
        description="Inspect, validate and reset swordmerge save files.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the current save (or a fresh state).")
    show.add_argument("--data-dir", type=Path, default=None, help="Directory holding the save file.")

    validate = sub.add_parser("validate", help="Check a snapshot file against the save schema.")
    validate.add_argument("file", type=Path)

    reset = sub.add_parser("reset", help="Delete the save and write a fresh state.")
    reset.add_argument("--data-dir", type=Path, default=None, help="Directory holding the save file.")
    return parser.parse_args(argv)


def _save_manager(settings: Settings, data_dir) -> SaveManager:
    root = data_dir if data_dir is not None else settings.resolved_data_dir()
    return SaveManager(root=root, filename=settings.save_filename, starting_currency=settings.starting_currency)


def _show(settings: Settings, args) -> int:
    engine = GameEngine.load(_save_manager(settings, args.data_dir), settings=settings)
    print(f"Currency:    {engine.currency}")
    print(f"Items:       {engine.grid.count()}")
    print(f"Total worth: {engine.grid.total_worth()}")
    for name, value in engine.stats.to_dict().items():
        print(f"  {name}: {value}")
    for slot in engine.grid.slots():
        if slot.item is not None:
            item = slot.item
            print(f"[{slot.position:2d}] tier {item.tier} +{item.upgrade_level} worth {item.worth}")
    return 0


def _validate(args) -> int:
    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    if codec.restore(text) is None:
        print(f"{args.file}: invalid snapshot")
        return 1
    print(f"{args.file}: OK")
    return 0


def _reset(settings: Settings, args) -> int:
    manager = _save_manager(settings, args.data_dir)
    manager.clear_save()
    if not manager.save_game(codec.fresh_state(settings.starting_currency)):
        return 1
    print(f"Fresh save written to {manager.save_path}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.WARNING)
    settings = Settings.load(user_path=args.config_path)

    if args.command == "show":
        return _show(settings, args)
    if args.command == "validate":
        return _validate(args)
    return _reset(settings, args)
