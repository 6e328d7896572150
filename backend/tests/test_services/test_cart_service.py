"""
Unit tests for the cart and price-tier aggregation

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal

import pytest

from toolshop.domain.cart import CartItem
from toolshop.domain.product import PriceTier
from toolshop.services.cart_service import Cart, cart_lines, cart_total


@pytest.fixture
def products(make_product):
    pliers = make_product(5, name="Locking Pliers", retail="350000", wholesale="310000")
    drill = make_product(1, name="Hammer Drill", retail="2500000", wholesale="2200000")
    return {p.id: p for p in (pliers, drill)}


class TestCartMutations:
    """Test Cart add/update/remove"""

    def test_add_appends_new_entry(self):
        cart = Cart()

        cart.add(5, 2)

        assert [(i.product_id, i.quantity) for i in cart.items] == [(5, 2)]

    def test_add_increments_existing_entry(self):
        """Test an entry stays unique per product"""
        cart = Cart()

        cart.add(5, 1)
        cart.add(1, 1)
        cart.add(5, 3)

        assert [(i.product_id, i.quantity) for i in cart.items] == [(5, 4), (1, 1)]

    def test_add_has_no_stock_bound(self):
        cart = Cart()

        cart.add(5, 10_000)

        assert cart.quantity_of(5) == 10_000

    def test_update_sets_quantity_exactly(self):
        cart = Cart([CartItem(product_id=5, quantity=4)])

        cart.update_quantity(5, 2)

        assert cart.quantity_of(5) == 2

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_update_to_zero_or_less_removes(self, quantity):
        cart = Cart([CartItem(product_id=5, quantity=4)])

        result = cart.update_quantity(5, quantity)

        assert result is None
        assert len(cart) == 0

    def test_update_unknown_product_is_noop(self):
        cart = Cart([CartItem(product_id=5, quantity=4)])

        assert cart.update_quantity(99, 2) is None
        assert [(i.product_id, i.quantity) for i in cart.items] == [(5, 4)]

    def test_remove_and_clear(self):
        cart = Cart([CartItem(product_id=5, quantity=1), CartItem(product_id=1, quantity=1)])

        cart.remove(5)
        assert cart.contains(5) is False
        assert cart.contains(1) is True

        cart.clear()
        assert len(cart) == 0

    def test_items_are_copies(self):
        cart = Cart([CartItem(product_id=5, quantity=1)])

        cart.items[0].quantity = 99

        assert cart.quantity_of(5) == 1


class TestCartTotals:
    """Test pricing at a tier"""

    def test_total_at_retail(self, products):
        """Test 2 x locking pliers at retail"""
        items = [CartItem(product_id=5, quantity=2)]

        assert cart_total(items, products, PriceTier.RETAIL) == Decimal("700000")

    def test_total_at_wholesale(self, products):
        items = [CartItem(product_id=5, quantity=2)]

        assert cart_total(items, products, PriceTier.WHOLESALE) == Decimal("620000")

    def test_total_sums_lines(self, products):
        items = [CartItem(product_id=5, quantity=2), CartItem(product_id=1, quantity=1)]

        assert cart_total(items, products, PriceTier.WHOLESALE) == Decimal("2820000")

    def test_missing_product_contributes_zero(self, products):
        """Test a deleted product is skipped, not an error"""
        items = [CartItem(product_id=5, quantity=1), CartItem(product_id=404, quantity=3)]

        assert cart_total(items, products, PriceTier.RETAIL) == Decimal("350000")
        assert [line.product.id for line in cart_lines(items, products, PriceTier.RETAIL)] == [5]

    def test_empty_cart_total_is_zero(self, products):
        assert cart_total([], products, PriceTier.RETAIL) == Decimal("0")

    def test_line_to_dict(self, products):
        line = cart_lines([CartItem(product_id=5, quantity=3)], products, PriceTier.RETAIL)[0]

        data = line.to_dict()

        assert data['product_id'] == 5
        assert data['unit_price'] == 350000.0
        assert data['line_total'] == 1050000.0
