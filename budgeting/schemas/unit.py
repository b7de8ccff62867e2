"""
Pydantic schema for the serialized budget unit.
"""
from pydantic import BaseModel, StrictStr
from typing import Literal

UnitTag = Literal["money", "time", "numeric"]


class UnitPayload(BaseModel):
    """Two-field wire form of a budget unit: a variant tag and its sub-unit string."""
    type: UnitTag
    value: StrictStr
