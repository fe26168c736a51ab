"""
swordmerge core package.

Headless progression engine for an idle item-merging game:
- Item model and value function
- 25-slot GridStore owning item placement
- CombinationEngine (two equal tiers -> next tier) and UpgradeEngine
  (success / maintain / destroy rolls)
- Snapshot persistence with strict validation and fresh-state fallback
- GameEngine tying them together and publishing progress events

UI layers, shops, quests and achievements live outside this package and
talk to it through GameEngine and the EventBus.
"""
from .core import RNG, EventBus, ProgressEvent, ProgressKind
from .engine import ActionResult, GameEngine
from .errors import (
    CorruptSaveError,
    IneligibleCombination,
    PersistenceError,
    SnapshotValidationError,
    SwordMergeError,
)
from .models import Item, create_item, item_worth
from .persistence import GameState, GameStats, SaveManager
from .systems import CAPACITY, CombinationEngine, GridStore, Outcome, OutcomeDistribution, UpgradeEngine

__version__ = "1.0.0"

__all__ = [
    "CAPACITY",
    "RNG",
    "ActionResult",
    "CombinationEngine",
    "CorruptSaveError",
    "EventBus",
    "GameEngine",
    "GameState",
    "GameStats",
    "GridStore",
    "IneligibleCombination",
    "Item",
    "Outcome",
    "OutcomeDistribution",
    "PersistenceError",
    "ProgressEvent",
    "ProgressKind",
    "SaveManager",
    "SnapshotValidationError",
    "SwordMergeError",
    "UpgradeEngine",
    "create_item",
    "item_worth",
]
