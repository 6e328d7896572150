"""
Catalog Service
Filtering and sorting for the shop page, and the quick price list

All functions are pure: they take the current product list and return a
new one, so callers can recompute whenever a filter changes.

Author: TM3
Date: 2026-10-19
"""
import unicodedata
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from pyuca import Collator

from toolshop.domain.product import PriceTier, Product
from toolshop.services.cart_service import Cart

ALL_CATEGORIES = "all"
FEATURED_COUNT = 4
NEW_ARRIVALS_COUNT = 4

PriceBound = Optional[Union[str, int, float, Decimal]]


@lru_cache(maxsize=None)
def _collator() -> Collator:
    """Unicode Collation Algorithm table, loaded on first name sort"""
    return Collator()


def _name_key(product: Product) -> Tuple[int, ...]:
    """Alphabetical collation key: پ sorts between ب and ت, É next to E"""
    return _collator().sort_key(unicodedata.normalize("NFKC", product.name))


SORTERS: Dict[str, Callable[[List[Product]], List[Product]]] = {
    "default": lambda products: products,
    "price-asc": lambda products: sorted(products, key=lambda p: p.prices.retail),
    "price-desc": lambda products: sorted(products, key=lambda p: p.prices.retail, reverse=True),
    "name-asc": lambda products: sorted(products, key=_name_key),
}


def parse_price_bound(value: PriceBound) -> Optional[Decimal]:
    """Blank or non-numeric bounds mean 'unbounded on that side'"""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        bound = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return bound if bound.is_finite() else None


def matches_search(product: Product, search: str) -> bool:
    """Case-insensitive substring match on name or SKU"""
    term = search.lower()
    return term in product.name.lower() or term in product.sku.lower()


def filter_products(
    products: Iterable[Product],
    category: str = ALL_CATEGORIES,
    search: str = "",
    min_price: PriceBound = None,
    max_price: PriceBound = None,
    sort_by: str = "default",
) -> List[Product]:
    """
    Filter and sort products for the shop page

    Args:
        products: Current catalog
        category: Category name, or "all"
        search: Term matched against name or SKU
        min_price: Inclusive lower bound on the retail price
        max_price: Inclusive upper bound on the retail price
        sort_by: default, price-asc, price-desc or name-asc

    Returns:
        Filtered (and possibly sorted) products

    Raises:
        ValueError: unknown sort key
    """
    if sort_by not in SORTERS:
        raise ValueError(f"Unknown sort key: {sort_by}")

    low = parse_price_bound(min_price)
    high = parse_price_bound(max_price)

    filtered = [
        p for p in products
        if (category == ALL_CATEGORIES or p.category == category)
        and matches_search(p, search)
        and (low is None or p.prices.retail >= low)
        and (high is None or p.prices.retail <= high)
    ]
    return SORTERS[sort_by](filtered)


def category_options(products: Iterable[Product]) -> List[str]:
    """"all" followed by the distinct product categories, first-seen order"""
    options = [ALL_CATEGORIES]
    for product in products:
        if product.category not in options:
            options.append(product.category)
    return options


def price_list(products: Iterable[Product], search: str, tier: PriceTier, cart: Cart) -> List[dict]:
    """
    Rows of the quick price table

    Only the name/SKU search applies here; every row carries the price
    at the given tier and whether the product is already in the cart.
    """
    return [
        {
            'product_id': p.id,
            'name': p.name,
            'sku': p.sku,
            'image': p.image,
            'stock': p.stock,
            'is_out_of_stock': p.is_out_of_stock,
            'price': float(p.price_for(tier)),
            'in_cart': cart.contains(p.id),
        }
        for p in products
        if matches_search(p, search)
    ]


def home_feed(products: Iterable[Product]) -> Dict[str, List[Product]]:
    """
    Product rows of the home page, in catalog order

    Returns:
        featured: the first four products
        new_arrivals: the next four
    """
    products = list(products)
    return {
        'featured': products[:FEATURED_COUNT],
        'new_arrivals': products[FEATURED_COUNT:FEATURED_COUNT + NEW_ARRIVALS_COUNT],
    }
