"""
Order Repository - Data Access Layer for Orders

Author: TM3
Date: 2026-10-19
"""
import logging

from toolshop.core.exceptions import NotFoundError
from toolshop.domain.order import Order, OrderStatus
from toolshop.repositories.base import InMemoryRepository

logger = logging.getLogger(__name__)


class OrderRepository(InMemoryRepository[Order]):
    """Repository for orders (string references, no creation path)"""

    model = Order
    entity_name = "Order"

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        """
        Update order status

        Args:
            order_id: Order reference
            status: New status

        Returns:
            The updated order

        Raises:
            NotFoundError: if the order does not exist
        """
        order = self.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)

        updated = order.model_copy(update={'status': OrderStatus(status)})
        self.update(updated)
        logger.info(f"Order {order_id} status: {order.status.value} -> {updated.status.value}")
        return updated
