from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..errors import CorruptSaveError, SnapshotValidationError
from .models import CURRENT_VERSION, STARTING_CURRENCY, GameState, GameStats
from .schema import SnapshotSchema

logger = logging.getLogger(__name__)


def snapshot(state: GameState) -> str:
    """Encode a GameState to a pretty-printed JSON string."""
    return json.dumps(state.to_dict(), ensure_ascii=False, sort_keys=True, indent=2)


def validate(data: Any) -> bool:
    """Return True only if ``data`` satisfies every snapshot rule."""
    try:
        SnapshotSchema.model_validate(data)
    except ValidationError as e:
        logger.warning("Snapshot failed validation: %s", e)
        return False
    return True


def decode(text: str) -> GameState:
    """Decode JSON text into a GameState, raising on any fault."""
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        raise CorruptSaveError(f"Invalid JSON: {e}") from e
    if not validate(data):
        raise SnapshotValidationError("Snapshot does not match the expected schema")
    return GameState.from_dict(data)


def restore(text: str) -> Optional[GameState]:
    """Decode a snapshot, returning None when it must be rejected."""
    try:
        return decode(text)
    except (CorruptSaveError, SnapshotValidationError) as e:
        logger.warning("Rejected snapshot: %s", e)
        return None


def fresh_state(starting_currency: float = STARTING_CURRENCY) -> GameState:
    return GameState(version=CURRENT_VERSION, currency=starting_currency, stats=GameStats())
