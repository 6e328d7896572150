"""
Cart Service
Cart mutations and price-tier aggregation

Cart entries reference products by id only. Entries whose product no
longer exists are skipped when pricing, never treated as errors.

Author: TM3
Date: 2026-10-19
"""
import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from toolshop.domain.cart import CartItem, CartLine
from toolshop.domain.product import PriceTier, Product

logger = logging.getLogger(__name__)


def cart_lines(items: Iterable[CartItem], products: Dict[int, Product], tier: PriceTier) -> List[CartLine]:
    """
    Join cart items with their products at the given tier

    Args:
        items: Cart entries
        products: Products keyed by id
        tier: Price tier applied to every line

    Returns:
        One CartLine per entry whose product still exists
    """
    lines = []
    for item in items:
        product = products.get(item.product_id)
        if product is None:
            logger.debug(f"Cart entry for missing product {item.product_id} skipped")
            continue
        unit_price = product.price_for(tier)
        lines.append(CartLine(
            product=product,
            quantity=item.quantity,
            unit_price=unit_price,
            line_total=unit_price * item.quantity,
        ))
    return lines


def cart_total(items: Iterable[CartItem], products: Dict[int, Product], tier: PriceTier) -> Decimal:
    """Sum of price_at_tier x quantity; missing products contribute 0"""
    return sum((line.line_total for line in cart_lines(items, products, tier)), Decimal('0'))


class Cart:
    """
    Shopping cart: an ordered list of CartItem, unique per product_id

    No upper bound is enforced against product stock.
    """

    def __init__(self, items: Optional[Iterable[CartItem]] = None):
        self._items: List[CartItem] = [i.model_copy() for i in (items or [])]

    @property
    def items(self) -> List[CartItem]:
        return [i.model_copy() for i in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def quantity_of(self, product_id: int) -> int:
        for item in self._items:
            if item.product_id == product_id:
                return item.quantity
        return 0

    def contains(self, product_id: int) -> bool:
        return self.quantity_of(product_id) > 0

    def add(self, product_id: int, quantity: int) -> CartItem:
        """Increment an existing entry, or append a new one"""
        for index, item in enumerate(self._items):
            if item.product_id == product_id:
                updated = CartItem(product_id=product_id, quantity=item.quantity + quantity)
                self._items[index] = updated
                logger.info(f"Cart: product {product_id} quantity {item.quantity} -> {updated.quantity}")
                return updated

        new_item = CartItem(product_id=product_id, quantity=quantity)
        self._items.append(new_item)
        logger.info(f"Cart: product {product_id} added x{quantity}")
        return new_item

    def update_quantity(self, product_id: int, quantity: int) -> Optional[CartItem]:
        """
        Set the quantity exactly; zero or less removes the entry.

        Returns the updated entry, or None when the entry was removed or
        never existed.
        """
        if quantity <= 0:
            self.remove(product_id)
            return None

        for index, item in enumerate(self._items):
            if item.product_id == product_id:
                self._items[index] = CartItem(product_id=product_id, quantity=quantity)
                return self._items[index].model_copy()
        return None

    def remove(self, product_id: int) -> None:
        self._items = [i for i in self._items if i.product_id != product_id]

    def clear(self) -> None:
        self._items = []
        logger.info("Cart cleared")
