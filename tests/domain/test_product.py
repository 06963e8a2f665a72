"""Unit tests for the Product entity's derived fields."""

from datetime import datetime

from stockwise.domain.model.product import Product


def _product(quantity: int, threshold: int = 5, unit_price: float = 10.0) -> Product:
    return Product(
        id="P1", name="Widget", quantity=quantity,
        threshold=threshold, unit_price=unit_price,
    )


class TestLowStock:

    def test_below_threshold_is_low(self):
        assert _product(quantity=2).is_low_stock

    def test_equal_to_threshold_is_not_low(self):
        assert not _product(quantity=5).is_low_stock

    def test_above_threshold_is_not_low(self):
        assert not _product(quantity=6).is_low_stock

    def test_zero_threshold_is_never_low(self):
        assert not _product(quantity=0, threshold=0).is_low_stock

    def test_follows_quantity_changes(self):
        p = _product(quantity=10)
        p.quantity = 4
        assert p.is_low_stock


class TestTotalValue:

    def test_quantity_times_unit_price(self):
        assert _product(quantity=3, unit_price=2.5).total_value == 7.5

    def test_zero_quantity_is_zero(self):
        assert _product(quantity=0, unit_price=99.99).total_value == 0.0


class TestDefaults:

    def test_date_added_set_at_creation(self):
        before = datetime.now()
        p = _product(quantity=1)
        assert before <= p.date_added <= datetime.now()

    def test_username_optional(self):
        assert _product(quantity=1).username is None
