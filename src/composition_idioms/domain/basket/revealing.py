"""
Revealing variant of the module idiom.

Every routine is written as a private function first. The public interface
is then assembled by pointing public names at those routines.
"""
from typing import Any, Callable, List, NamedTuple

from composition_idioms.domain.basket.module import BasketModule
from composition_idioms.domain.basket.value_objects import LineItem
from composition_idioms.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class NameHolder(NamedTuple):
    """Public surface of a revealing name holder."""
    set_name: Callable[[str], None]
    get_name: Callable[[], str]
    greeting: str


def create_revealing_basket() -> BasketModule:
    """Create a basket with the same contract as ``create_basket``."""
    basket: List[LineItem] = []

    def _add_item(values: Any) -> None:
        basket.append(LineItem.coerce(values))

    def _get_item_count() -> int:
        return len(basket)

    def _get_total() -> float:
        return sum((line.price for line in basket), 0.0)

    def _do_something() -> None:
        logger.debug("Private basket routine called", item_count=len(basket))

    return BasketModule(
        add_item=_add_item,
        get_item_count=_get_item_count,
        get_total=_get_total,
        do_something=_do_something,
    )


def create_name_holder(name: str = "Stephen Hawking") -> NameHolder:
    state = {"name": name}

    def _get_name() -> str:
        return "Name:" + state["name"]

    def _set_name(new_name: str) -> None:
        state["name"] = new_name

    return NameHolder(set_name=_set_name, get_name=_get_name, greeting="Hi")
