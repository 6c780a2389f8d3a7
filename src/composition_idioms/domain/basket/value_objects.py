# src/composition_idioms/domain/basket/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
import math
from numbers import Real
from typing import Any, Mapping, Union

from composition_idioms.domain.core.exceptions import ValidationError

@dataclass(frozen=True)
class LineItem:
    """One basket record: an item name and its price."""
    item: str
    price: float

    def __post_init__(self):
        if not isinstance(self.item, str) or not self.item:
            raise ValidationError("Item name must be a non-empty string")
        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise ValidationError(f"Price of {self.item} must be a number")
        if not math.isfinite(self.price):
            raise ValidationError(f"Price of {self.item} must be finite")
        if self.price < 0:
            raise ValidationError(f"Price of {self.item} cannot be negative")

    def to_dict(self) -> dict:
        return {"item": self.item, "price": self.price}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LineItem:
        if "item" not in data or "price" not in data:
            raise ValidationError("Line item requires 'item' and 'price'", dict(data))
        return cls(item=data["item"], price=data["price"])

    @classmethod
    def coerce(cls, values: Union[LineItem, Mapping[str, Any]]) -> LineItem:
        if isinstance(values, cls):
            return values
        if isinstance(values, Mapping):
            return cls.from_dict(values)
        raise ValidationError(f"Cannot build a line item from {type(values).__name__}")
