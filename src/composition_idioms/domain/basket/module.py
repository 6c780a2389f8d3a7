"""
Module idiom: state hidden in a closure behind a literal interface.

The returned interface is an immutable tuple of callables. The state they
share lives only in the enclosing call, so nothing outside the listed
operations can read or replace it.
"""
from typing import Any, Callable, List, Mapping, NamedTuple, Union

from composition_idioms.domain.basket.value_objects import LineItem
from composition_idioms.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class BasketModule(NamedTuple):
    """Public surface of a basket container."""
    add_item: Callable[[Union[LineItem, Mapping[str, Any]]], None]
    get_item_count: Callable[[], int]
    get_total: Callable[[], float]
    do_something: Callable[[], None]


class CounterModule(NamedTuple):
    """Public surface of a counter container."""
    increment_counter: Callable[[], int]
    reset_counter: Callable[[], int]


def create_basket() -> BasketModule:
    """Create a basket whose line items are reachable only through its operations."""
    basket: List[LineItem] = []

    def do_something_private() -> None:
        logger.debug("Private basket routine called", item_count=len(basket))

    def add_item(values):
        basket.append(LineItem.coerce(values))

    return BasketModule(
        add_item=add_item,
        get_item_count=lambda: len(basket),
        get_total=lambda: sum((line.price for line in basket), 0.0),
        do_something=do_something_private,
    )


def create_counter() -> CounterModule:
    counter = 0

    def increment_counter() -> int:
        nonlocal counter
        counter += 1
        return counter

    def reset_counter() -> int:
        # Returns the value held before resetting
        nonlocal counter
        previous = counter
        counter = 0
        logger.debug("Counter reset", previous=previous)
        return previous

    return CounterModule(increment_counter=increment_counter, reset_counter=reset_counter)
