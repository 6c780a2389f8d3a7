"""Encapsulated-state containers: module idiom and its revealing variant."""

from .module import BasketModule, CounterModule, create_basket, create_counter
from .revealing import NameHolder, create_name_holder, create_revealing_basket
from .value_objects import LineItem

__all__ = [
    "BasketModule",
    "CounterModule",
    "LineItem",
    "NameHolder",
    "create_basket",
    "create_counter",
    "create_name_holder",
    "create_revealing_basket",
]
