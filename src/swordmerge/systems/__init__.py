from .combination import CombinationEngine
from .grid import CAPACITY, GridStore, Slot
from .upgrade import Outcome, OutcomeDistribution, UpgradeEngine

__all__ = [
    "CAPACITY",
    "CombinationEngine",
    "GridStore",
    "Outcome",
    "OutcomeDistribution",
    "Slot",
    "UpgradeEngine",
]
