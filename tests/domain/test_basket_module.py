import pytest

from composition_idioms.domain.basket.module import (
    BasketModule,
    create_basket,
    create_counter,
)
from composition_idioms.domain.basket.revealing import create_revealing_basket
from composition_idioms.domain.basket.value_objects import LineItem
from composition_idioms.domain.core.exceptions import ValidationError


@pytest.fixture
def basket():
    basket = create_basket()
    basket.add_item({"item": "bread", "price": 0.5})
    basket.add_item({"item": "butter", "price": 0.3})
    return basket


def test_count_and_total(basket):
    assert basket.get_item_count() == 2
    assert basket.get_total() == pytest.approx(0.8)


def test_reads_are_idempotent(basket):
    assert basket.get_item_count() == basket.get_item_count()
    assert basket.get_total() == basket.get_total()


def test_empty_basket():
    basket = create_basket()
    assert basket.get_item_count() == 0
    assert basket.get_total() == 0.0


def test_accepts_line_item_records():
    basket = create_basket()
    basket.add_item(LineItem("milk", 1.25))
    assert basket.get_item_count() == 1
    assert basket.get_total() == pytest.approx(1.25)


@pytest.mark.parametrize("factory", [create_basket, create_revealing_basket])
def test_hidden_sequence_not_reachable(factory):
    basket = factory()
    basket.add_item({"item": "bread", "price": 0.5})
    # Only the listed operations are exposed
    assert BasketModule._fields == ("add_item", "get_item_count", "get_total", "do_something")
    assert not hasattr(basket, "basket")
    assert not hasattr(basket, "__dict__")
    with pytest.raises(AttributeError):
        basket.basket = []


@pytest.mark.parametrize("factory", [create_basket, create_revealing_basket])
def test_operations_cannot_be_rebound(factory):
    basket = factory()
    with pytest.raises(AttributeError):
        basket.get_total = lambda: 0


def test_baskets_do_not_share_state(basket):
    other = create_basket()
    other.add_item({"item": "jam", "price": 2})
    assert basket.get_item_count() == 2
    assert other.get_item_count() == 1


def test_do_something_is_callable(basket):
    assert basket.do_something() is None


def test_malformed_record_raises():
    basket = create_basket()
    with pytest.raises(ValidationError):
        basket.add_item({"item": "bread"})
    with pytest.raises(ValidationError):
        basket.add_item({"item": "bread", "price": "cheap"})
    with pytest.raises(ValidationError):
        basket.add_item(("bread", 0.5))
    for price in (float("nan"), float("inf"), float("-inf")):
        with pytest.raises(ValidationError, match="finite"):
            basket.add_item({"item": "bread", "price": price})
    assert basket.get_item_count() == 0


class TestCounterModule:
    """Test the hidden-counter container."""

    def test_increment(self):
        counter = create_counter()
        assert counter.increment_counter() == 1
        assert counter.increment_counter() == 2

    def test_reset_returns_previous_value(self):
        counter = create_counter()
        counter.increment_counter()
        counter.increment_counter()
        assert counter.reset_counter() == 2
        assert counter.increment_counter() == 1

    def test_counters_are_independent(self):
        first = create_counter()
        second = create_counter()
        first.increment_counter()
        first.increment_counter()
        assert second.increment_counter() == 1
