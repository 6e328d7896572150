"""
Dashboard Service
Summary figures for the customer dashboard and the admin console

Author: TM3
Date: 2026-10-19
"""
from collections import Counter
from decimal import Decimal
from typing import Iterable, List

from toolshop.domain.order import Order, OrderStatus
from toolshop.domain.product import Product


def customer_summary(orders: Iterable[Order]) -> dict:
    """
    Customer dashboard figures

    Returns:
        order_count, total_spent and open_orders (processing or shipped)
    """
    orders = list(orders)
    total_spent = sum((o.total for o in orders), Decimal('0'))
    return {
        'order_count': len(orders),
        'total_spent': float(total_spent),
        'open_orders': sum(1 for o in orders if o.is_open),
    }


def top_products(orders: Iterable[Order], limit: int = 3) -> List[dict]:
    """Best sellers by quantity across order snapshots (by product name)"""
    quantities: Counter = Counter()
    for order in orders:
        for line in order.items:
            quantities[line.product_name] += line.quantity
    return [
        {'product_name': name, 'quantity': quantity}
        for name, quantity in quantities.most_common(limit)
    ]


def admin_summary(orders: Iterable[Order], products: Iterable[Product]) -> dict:
    """
    Admin dashboard figures

    "Today" figures are taken from the most recent order in the list,
    since orders only carry a display date.
    """
    orders = list(orders)
    latest = orders[0] if orders else None
    return {
        'today_sales': float(latest.total) if latest else 0.0,
        'today_orders': 1 if latest else 0,
        'pending_orders': sum(1 for o in orders if o.status == OrderStatus.PROCESSING),
        'total_products': len(list(products)),
        'top_products': top_products(orders),
    }
