from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.item import Item

logger = logging.getLogger(__name__)

CAPACITY = 25


@dataclass
class Slot:
    position: int
    item: Optional[Item] = None

    def to_dict(self) -> dict:
        return {"position": self.position, "item": self.item.to_dict() if self.item is not None else None}


def _is_valid_item(item: object) -> bool:
    if not isinstance(item, Item):
        return False
    if not isinstance(item.tier, int) or isinstance(item.tier, bool) or item.tier < 1:
        return False
    if not isinstance(item.upgrade_level, int) or isinstance(item.upgrade_level, bool) or item.upgrade_level < 0:
        return False
    return True


class GridStore:
    """Fixed-size slot grid; the sole owner of item placement.

    Mutators that report failure (``False`` / ``None``) never touch the grid.
    Indices outside ``[0, CAPACITY)`` are treated as invalid input, not errors.
    """

    def __init__(self) -> None:
        self._slots: List[Slot] = [Slot(position=i) for i in range(CAPACITY)]

    @classmethod
    def from_items(cls, items: Dict[int, Item]) -> "GridStore":
        """Rebuild a grid from a position -> item mapping (used on load)."""
        grid = cls()
        for position, item in items.items():
            if not grid.add(item, position):
                logger.warning("Dropping item %s that could not be placed at %s", getattr(item, "id", item), position)
        return grid

    def __len__(self) -> int:
        return CAPACITY

    @staticmethod
    def in_range(index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CAPACITY

    # Queries

    def get(self, index: int) -> Optional[Item]:
        if not self.in_range(index):
            return None
        return self._slots[index].item

    def find_empty_slot(self) -> Optional[int]:
        for slot in self._slots:
            if slot.item is None:
                return slot.position
        return None

    def find(self, item_id: str) -> Optional[int]:
        for slot in self._slots:
            if slot.item is not None and slot.item.id == item_id:
                return slot.position
        return None

    def is_full(self) -> bool:
        return self.find_empty_slot() is None

    def all_items(self) -> List[Item]:
        return [slot.item for slot in self._slots if slot.item is not None]

    def total_worth(self) -> int:
        return sum(item.worth for item in self.all_items())

    def count(self) -> int:
        return len(self.all_items())

    def slots(self) -> List[Slot]:
        return [Slot(position=s.position, item=s.item) for s in self._slots]

    # Mutators

    def add(self, item: Optional[Item], index: Optional[int] = None) -> bool:
        if not _is_valid_item(item):
            logger.warning("Rejected invalid item: %r", item)
            return False
        if self.find(item.id) is not None:
            logger.warning("Item %s is already placed in the grid", item.id)
            return False

        target = index if index is not None else self.find_empty_slot()
        if target is None:
            logger.debug("Grid is full; cannot add item %s", item.id)
            return False
        if not self.in_range(target):
            logger.warning("Invalid grid position: %r", target)
            return False
        if self._slots[target].item is not None:
            logger.debug("Grid position %s is occupied", target)
            return False

        self._slots[target].item = item
        logger.debug("Placed item %s (tier %s) at %s", item.id, item.tier, target)
        return True

    def remove(self, index: int) -> Optional[Item]:
        if not self.in_range(index):
            logger.warning("Invalid grid position: %r", index)
            return None
        item = self._slots[index].item
        self._slots[index].item = None
        return item

    def move(self, source: int, target: int) -> bool:
        if not (self.in_range(source) and self.in_range(target)):
            logger.warning("Invalid grid positions: %r, %r", source, target)
            return False
        item = self._slots[source].item
        if item is None:
            logger.debug("No item at source position %s", source)
            return False
        if self._slots[target].item is not None:
            logger.debug("Target position %s is not empty", target)
            return False
        self._slots[target].item = item
        self._slots[source].item = None
        return True

    def swap(self, a: int, b: int) -> bool:
        if not (self.in_range(a) and self.in_range(b)):
            logger.warning("Invalid grid positions: %r, %r", a, b)
            return False
        if a == b:
            logger.debug("Cannot swap position %s with itself", a)
            return False
        first, second = self._slots[a].item, self._slots[b].item
        if first is None or second is None:
            logger.debug("Both positions must hold items to swap (%s, %s)", a, b)
            return False
        self._slots[a].item, self._slots[b].item = second, first
        return True

    def sort_descending_by_tier(self) -> None:
        """Pack items into the lowest slots, highest tier first.

        Equal tiers keep their relative order.
        """
        ordered = sorted(self.all_items(), key=lambda item: item.tier, reverse=True)
        self.clear()
        for position, item in enumerate(ordered):
            self._slots[position].item = item

    def clear(self) -> None:
        for slot in self._slots:
            slot.item = None
