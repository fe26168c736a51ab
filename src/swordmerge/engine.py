from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Settings
from .core.events import EventBus, ProgressEvent, ProgressKind
from .core.rng import RNG
from .errors import IneligibleCombination
from .models.item import Item
from .persistence.codec import fresh_state
from .persistence.manager import SaveManager
from .persistence.models import GameState, GameStats
from .systems.combination import CombinationEngine
from .systems.grid import GridStore
from .systems.upgrade import Outcome, UpgradeEngine

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Outcome of one engine action.

    ``code`` is one of OK, INVALID_SLOT, EMPTY_SLOT, OCCUPIED, SAME_SLOT,
    INELIGIBLE, GRID_FULL, DUPLICATE_ITEM or INVALID_ITEM.
    """

    success: bool
    message: str
    code: str = "OK"
    item: Optional[Item] = None
    outcome: Optional[Outcome] = None
    amount: int = 0


class GameEngine:
    """One game session: grid, currency and statistics plus the rule engines.

    Every action returns an ActionResult instead of raising. Successful
    mutations publish progress events where applicable and, when a
    SaveManager is attached and autosave is on, are written through to disk.
    """

    def __init__(
        self,
        state: Optional[GameState] = None,
        *,
        rng: Optional[RNG] = None,
        bus: Optional[EventBus] = None,
        save_manager: Optional[SaveManager] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings()
        state = state or fresh_state(self.settings.starting_currency)
        self.version = state.version
        self.currency = state.currency
        self.stats = GameStats(**state.stats.to_dict())
        self.grid: GridStore = state.build_grid()
        self.rng = rng or RNG(self.settings.rng_seed)
        self.bus = bus or EventBus()
        self.save_manager = save_manager
        self.combiner = CombinationEngine()
        self.upgrader = UpgradeEngine(self.rng)

    @classmethod
    def load(cls, save_manager: SaveManager, **kwargs) -> "GameEngine":
        """Build an engine from the stored save, or a fresh state if none is usable."""
        return cls(save_manager.load_game(), save_manager=save_manager, **kwargs)

    # Persistence

    def to_state(self) -> GameState:
        return GameState(
            version=self.version,
            currency=self.currency,
            grid=self.grid.slots(),
            stats=GameStats(**self.stats.to_dict()),
        )

    def save(self) -> bool:
        if self.save_manager is None:
            return False
        return self.save_manager.save_game(self.to_state())

    def _commit(self) -> None:
        if self.save_manager is not None and self.settings.autosave:
            self.save()

    # Actions

    def _occupied(self, index: int) -> Optional[ActionResult]:
        if not GridStore.in_range(index):
            return ActionResult(False, f"Invalid slot: {index}", code="INVALID_SLOT")
        if self.grid.get(index) is None:
            return ActionResult(False, f"No item at slot {index}", code="EMPTY_SLOT")
        return None

    def place_item(self, item: Item, index: Optional[int] = None) -> ActionResult:
        """Place an item granted by an outside system (e.g. a shop)."""
        if index is not None and not GridStore.in_range(index):
            return ActionResult(False, f"Invalid slot: {index}", code="INVALID_SLOT")
        if isinstance(item, Item) and self.grid.find(item.id) is not None:
            return ActionResult(False, f"Item {item.id} is already in the grid", code="DUPLICATE_ITEM")
        target = index if index is not None else self.grid.find_empty_slot()
        if target is None:
            return ActionResult(False, "Grid is full. Sell or merge items to make space.", code="GRID_FULL")
        if self.grid.get(target) is not None:
            return ActionResult(False, f"Slot {target} is occupied", code="OCCUPIED")
        if not self.grid.add(item, target):
            return ActionResult(False, f"Cannot place {item!r}", code="INVALID_ITEM")
        self._commit()
        return ActionResult(True, f"Placed item at slot {target}", item=item)

    def merge_slots(self, source: int, target: int) -> ActionResult:
        for index in (source, target):
            failure = self._occupied(index)
            if failure is not None:
                return failure
        if source == target:
            return ActionResult(False, "Cannot merge an item with itself", code="SAME_SLOT")

        first, second = self.grid.get(source), self.grid.get(target)
        try:
            merged = self.combiner.combine(first, second)
        except IneligibleCombination as exc:
            logger.debug("Merge rejected for slots %s and %s: %s", source, target, exc)
            return ActionResult(False, str(exc), code="INELIGIBLE")

        # Remove both sources before placing the result.
        self.grid.remove(source)
        self.grid.remove(target)
        self.grid.add(merged, target)

        self.stats.total_merges += 1
        self.stats.max_level = max(self.stats.max_level, merged.tier)
        self.bus.publish(ProgressEvent(ProgressKind.COMBINE, 1))
        self._commit()
        logger.info("Merged slots %s + %s into tier %s", source, target, merged.tier)
        return ActionResult(True, f"Created a tier {merged.tier} item", item=merged)

    def enhance_slot(self, index: int) -> ActionResult:
        failure = self._occupied(index)
        if failure is not None:
            return failure

        item = self.grid.get(index)
        outcome = self.upgrader.attempt(item)
        if outcome is None:
            return ActionResult(False, f"Item at slot {index} cannot be upgraded", code="INVALID_ITEM")
        if outcome is Outcome.SUCCESS:
            item.upgrade()
            message = f"Upgrade succeeded: now +{item.upgrade_level}"
        elif outcome is Outcome.MAINTAIN:
            message = "Upgrade failed; the item is unchanged"
        else:
            self.grid.remove(index)
            item = None
            message = "Upgrade failed; the item was destroyed"

        self.stats.total_enhancements += 1
        self.bus.publish(ProgressEvent(ProgressKind.UPGRADE, 1))
        self._commit()
        return ActionResult(True, message, item=item, outcome=outcome)

    def drop(self, source: int, target: int) -> ActionResult:
        """Resolve dragging the item at ``source`` onto ``target``.

        Empty target: move. Equal tiers: merge. Otherwise: swap.
        """
        failure = self._occupied(source)
        if failure is not None:
            return failure
        if not GridStore.in_range(target):
            return ActionResult(False, f"Invalid slot: {target}", code="INVALID_SLOT")
        if source == target:
            return ActionResult(False, "Item dropped onto its own slot", code="SAME_SLOT")

        target_item = self.grid.get(target)
        if target_item is None:
            self.grid.move(source, target)
            self._commit()
            return ActionResult(True, f"Moved item to slot {target}", item=self.grid.get(target))
        if self.combiner.can_combine(self.grid.get(source), target_item):
            return self.merge_slots(source, target)
        self.grid.swap(source, target)
        self._commit()
        return ActionResult(True, f"Swapped slots {source} and {target}", item=self.grid.get(target))

    def sell_slot(self, index: int) -> ActionResult:
        failure = self._occupied(index)
        if failure is not None:
            return failure
        item = self.grid.remove(index)
        self.currency += item.worth
        self.stats.total_sales += 1
        self.stats.total_gold_earned += item.worth
        self._commit()
        return ActionResult(True, f"Sold for {item.worth} gold", item=item, amount=item.worth)

    def sell_all(self) -> ActionResult:
        total = self.grid.total_worth()
        sold = self.grid.count()
        if sold == 0:
            return ActionResult(True, "Nothing to sell", amount=0)
        self.grid.clear()
        self.currency += total
        self.stats.total_sales += sold
        self.stats.total_gold_earned += total
        self._commit()
        logger.info("Sold %s items for %s gold", sold, total)
        return ActionResult(True, f"Sold {sold} items for {total} gold", amount=total)

    def sort_grid(self) -> ActionResult:
        self.grid.sort_descending_by_tier()
        self._commit()
        return ActionResult(True, "Grid sorted by tier")
