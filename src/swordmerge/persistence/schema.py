"""Structural schema for persisted snapshots.

Validation is all-or-nothing: a snapshot either satisfies every rule here or
is rejected as a whole.
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator, model_validator

from ..systems.grid import CAPACITY
from .models import SUPPORTED_VERSIONS

Number = Union[StrictInt, StrictFloat]


class ItemSchema(BaseModel):
    id: StrictStr
    tier: StrictInt = Field(..., ge=1)
    upgrade_level: StrictInt = Field(..., ge=0)
    worth: Number


class SlotSchema(BaseModel):
    position: Number
    item: Optional[ItemSchema]


class StatsSchema(BaseModel):
    total_merges: Number
    total_enhancements: Number
    total_purchases: Number
    total_sales: Number
    max_level: Number
    total_gold_earned: Number


class SnapshotSchema(BaseModel):
    version: StrictStr
    currency: Number
    grid: List[SlotSchema]
    stats: StatsSchema
    saved_at: Optional[StrictStr] = None

    @field_validator("version")
    @classmethod
    def known_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(f"Unrecognized snapshot version: {v}")
        return v

    @field_validator("currency")
    @classmethod
    def non_negative_currency(cls, v: Union[int, float]) -> Union[int, float]:
        if not v >= 0:
            raise ValueError("currency must be a non-negative number")
        return v

    @field_validator("grid")
    @classmethod
    def exact_capacity(cls, v: List[SlotSchema]) -> List[SlotSchema]:
        if len(v) != CAPACITY:
            raise ValueError(f"grid must hold exactly {CAPACITY} slots, got {len(v)}")
        return v

    @model_validator(mode="after")
    def unique_item_ids(self) -> "SnapshotSchema":
        ids = [slot.item.id for slot in self.grid if slot.item is not None]
        if len(ids) != len(set(ids)):
            raise ValueError("an item id appears in more than one slot")
        return self
