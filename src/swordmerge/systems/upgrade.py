from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple, Optional

from ..core.rng import RNG
from ..models.item import Item

logger = logging.getLogger(__name__)

MIN_SUCCESS = 0.3
MAX_SUCCESS = 0.9
MAX_DESTROY = 0.5
STEP = 0.1


class Outcome(str, Enum):
    SUCCESS = "SUCCESS"
    MAINTAIN = "MAINTAIN"
    DESTROY = "DESTROY"


class OutcomeDistribution(NamedTuple):
    success: float
    maintain: float
    destroy: float


def _is_level(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class UpgradeEngine:
    """Risk-weighted upgrade rolls.

    Success odds fall and destroy odds rise with the current upgrade level:

        success  = max(0.3, 0.9 - 0.1 * level)
        destroy  = min(0.5, 0.1 * level)
        maintain = 1 - success - destroy

    The two clamps are independent, so from level 6 upward maintain settles
    at 0.2 rather than reaching zero.

    The engine only reports an Outcome. Applying it is the caller's job:
    SUCCESS -> ``item.upgrade()``, MAINTAIN -> nothing, DESTROY -> remove the
    item from the grid.
    """

    def __init__(self, rng: Optional[RNG] = None) -> None:
        self.rng = rng or RNG()

    def outcome_distribution(self, upgrade_level: int) -> OutcomeDistribution:
        success = max(MIN_SUCCESS, MAX_SUCCESS - upgrade_level * STEP)
        destroy = min(MAX_DESTROY, upgrade_level * STEP)
        maintain = 1 - success - destroy
        return OutcomeDistribution(success=success, maintain=maintain, destroy=destroy)

    def roll(self, distribution: OutcomeDistribution) -> Outcome:
        draw = self.rng.random()
        if draw < distribution.success:
            return Outcome.SUCCESS
        if draw < distribution.success + distribution.maintain:
            return Outcome.MAINTAIN
        return Outcome.DESTROY

    def attempt(self, item: Optional[Item]) -> Optional[Outcome]:
        """Roll once for ``item``; None when there is no valid item to upgrade."""
        if not isinstance(item, Item) or not _is_level(item.upgrade_level):
            logger.warning("Cannot attempt an upgrade on %r", item)
            return None
        distribution = self.outcome_distribution(item.upgrade_level)
        outcome = self.roll(distribution)
        logger.debug("Upgrade attempt on %s at +%s: %s", item.id, item.upgrade_level, outcome.value)
        return outcome
