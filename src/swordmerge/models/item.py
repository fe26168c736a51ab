from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict

logger = logging.getLogger(__name__)

BASE_WORTH = 10
UPGRADE_BONUS = Fraction(1, 2)


def item_worth(tier: int, upgrade_level: int) -> int:
    """Return the currency worth of an item.

    floor(2^(tier-1) * BASE_WORTH * (1 + upgrade_level * UPGRADE_BONUS))

    Inputs are not validated; callers pass tier >= 1 and upgrade_level >= 0.
    The bonus is a Fraction so arbitrarily large tiers stay exact.
    """
    base = (2 ** (tier - 1)) * BASE_WORTH
    multiplier = 1 + upgrade_level * UPGRADE_BONUS
    return math.floor(base * multiplier)


@dataclass
class Item:
    """A collectible item held in a grid slot.

    Worth is derived from tier and upgrade level on every access, so it can
    never drift from the value function.
    """

    id: str
    tier: int
    upgrade_level: int = 0

    @property
    def worth(self) -> int:
        return item_worth(self.tier, self.upgrade_level)

    def upgrade(self) -> None:
        logger.debug("Upgrading item %s: +%s -> +%s", self.id, self.upgrade_level, self.upgrade_level + 1)
        self.upgrade_level += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "tier": self.tier,
            "upgrade_level": self.upgrade_level,
            "worth": self.worth,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Item":
        return Item(id=data["id"], tier=int(data["tier"]), upgrade_level=int(data.get("upgrade_level", 0)))


def create_item(tier: int, upgrade_level: int = 0) -> Item:
    """Build a new item with a fresh random identifier."""
    return Item(id=str(uuid.uuid4()), tier=tier, upgrade_level=upgrade_level)
