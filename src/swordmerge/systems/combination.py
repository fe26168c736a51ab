from __future__ import annotations

import logging
from typing import Optional

from ..errors import IneligibleCombination
from ..models.item import Item, create_item

logger = logging.getLogger(__name__)


class CombinationEngine:
    """Promotes two equal-tier items into one item of the next tier.

    The engine is pure: it neither mutates the source items nor touches the
    grid. Callers remove both sources before placing the result.
    """

    def can_combine(self, first: Optional[Item], second: Optional[Item]) -> bool:
        if first is None or second is None:
            return False
        return first.tier == second.tier

    def combine(self, first: Optional[Item], second: Optional[Item]) -> Item:
        if not self.can_combine(first, second):
            raise IneligibleCombination(
                f"Cannot combine items with different tiers: "
                f"{getattr(first, 'tier', None)} and {getattr(second, 'tier', None)}"
            )
        result = create_item(first.tier + 1, 0)
        logger.debug("Combined %s + %s into %s (tier %s)", first.id, second.id, result.id, result.tier)
        return result
