from .events import EventBus, ProgressEvent, ProgressKind
from .rng import RNG

__all__ = ["EventBus", "ProgressEvent", "ProgressKind", "RNG"]
