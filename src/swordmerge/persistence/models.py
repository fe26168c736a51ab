from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..models.item import Item
from ..systems.grid import CAPACITY, GridStore, Slot

# Bump alongside SUPPORTED_VERSIONS when the layout changes
CURRENT_VERSION = "1.0.0"
SUPPORTED_VERSIONS = frozenset({CURRENT_VERSION})

STARTING_CURRENCY = 100


@dataclass
class GameStats:
    """Aggregate counters persisted with every snapshot."""

    total_merges: int = 0
    total_enhancements: int = 0
    total_purchases: int = 0
    total_sales: int = 0
    max_level: int = 0
    total_gold_earned: int = 0

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameStats":
        return cls(**{name: data[name] for name in cls.field_names()})


def _empty_grid() -> List[Slot]:
    return [Slot(position=i) for i in range(CAPACITY)]


@dataclass
class GameState:
    """Everything a snapshot carries: grid layout, currency and statistics."""

    version: str = CURRENT_VERSION
    currency: float = STARTING_CURRENCY
    grid: List[Slot] = field(default_factory=_empty_grid)
    stats: GameStats = field(default_factory=GameStats)
    saved_at: Optional[str] = field(default=None, compare=False)

    def touch(self) -> None:
        self.saved_at = datetime.now(timezone.utc).isoformat()

    def build_grid(self) -> GridStore:
        return GridStore.from_items({slot.position: slot.item for slot in self.grid if slot.item is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "currency": self.currency,
            "grid": [slot.to_dict() for slot in self.grid],
            "stats": self.stats.to_dict(),
            "saved_at": self.saved_at,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GameState":
        # Slots are rebuilt by array index; the stored position is informational.
        grid = [
            Slot(position=i, item=Item.from_dict(raw["item"]) if raw.get("item") is not None else None)
            for i, raw in enumerate(data["grid"])
        ]
        return GameState(
            version=data["version"],
            currency=data["currency"],
            grid=grid,
            stats=GameStats.from_dict(data["stats"]),
            saved_at=data.get("saved_at"),
        )
