"""
Budget units: what a budget measures.

A unit is exactly one of three variants. Every variant serializes to the same
two-field structure::

    {"type": "money" | "time" | "numeric", "value": "<currency or unit>"}

The variants share the ``value`` key, so the tag is required to tell them apart
and decoding is written out by hand rather than inferred from the fields.
"""
import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from budgeting.core.exceptions import DecodeError
from budgeting.schemas.unit import UnitPayload


class BudgetUnit(BaseModel, ABC):
    """Abstract base of the closed set of unit variants. Immutable and hashable."""
    model_config = ConfigDict(frozen=True)
    
    tag: ClassVar[str]
    
    @property
    @abstractmethod
    def value(self) -> str:
        """Currency or sub-unit string."""
    
    def to_dict(self) -> Dict[str, str]:
        """Tagged two-field representation."""
        return {"type": self.tag, "value": self.value}
    
    def encode(self) -> str:
        """Serialize to JSON text."""
        return json.dumps(self.to_dict())
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BudgetUnit":
        """
        Build a unit from its tagged two-field representation.
        
        Raises:
            DecodeError: if ``type`` is unknown, ``value`` is not a string,
                either field is absent, or ``data`` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise DecodeError(f"Budget unit must be an object, got {type(data).__name__}")
        try:
            payload = UnitPayload.model_validate(dict(data))
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise DecodeError(f"Malformed budget unit ({fields}): {dict(data)!r}") from e
        return _VARIANTS[payload.type]._from_value(payload.value)
    
    @classmethod
    def decode(cls, raw: Union[str, bytes]) -> "BudgetUnit":
        """Parse JSON text produced by ``encode``."""
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Budget unit is not valid JSON: {e}") from e
        return cls.from_dict(data)
    
    @classmethod
    @abstractmethod
    def _from_value(cls, value: str) -> "BudgetUnit":
        """Build this variant from its wire value."""


class Money(BudgetUnit):
    """Money in a currency, e.g. ``Money(currency="USD")``."""
    tag: ClassVar[str] = "money"
    currency: str
    
    @property
    def value(self) -> str:
        return self.currency
    
    @classmethod
    def _from_value(cls, value: str) -> "Money":
        return cls(currency=value)


class Time(BudgetUnit):
    """Time in a unit such as ``"hours"``."""
    tag: ClassVar[str] = "time"
    unit: str
    
    @property
    def value(self) -> str:
        return self.unit
    
    @classmethod
    def _from_value(cls, value: str) -> "Time":
        return cls(unit=value)


class Numeric(BudgetUnit):
    """Any other countable unit, e.g. ``"items"``."""
    tag: ClassVar[str] = "numeric"
    unit: str
    
    @property
    def value(self) -> str:
        return self.unit
    
    @classmethod
    def _from_value(cls, value: str) -> "Numeric":
        return cls(unit=value)


_VARIANTS: Dict[str, Type[BudgetUnit]] = {
    Money.tag: Money,
    Time.tag: Time,
    Numeric.tag: Numeric,
}
