"""
Order Domain Models

Orders carry a snapshot of what was bought; lines are not live
references to the product catalog.

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle"""
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


class OrderLine(BaseModel):
    """
    Order line snapshot

    Fields:
        product_name: Product name at order time
        quantity: Units ordered
        price: Unit price paid
    """

    product_name: str = Field(..., description="Product name at order time")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    price: Decimal = Field(..., description="Price per unit", ge=0)

    model_config = ConfigDict(from_attributes=True)


class Order(BaseModel):
    """
    Order domain model

    Fields:
        id: Order reference (e.g. ABC-123)
        date: Order date as recorded by the shop
        items: Line snapshots
        total: Order total
        status: processing, shipped or delivered
    """

    id: str = Field(..., description="Order reference")
    date: str = Field(..., description="Order date")
    items: List[OrderLine] = Field(default_factory=list, description="Order lines")
    total: Decimal = Field(..., description="Order total", ge=0)
    status: OrderStatus = Field(OrderStatus.PROCESSING, description="Order status")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_open(self) -> bool:
        """Not yet delivered"""
        return self.status in (OrderStatus.PROCESSING, OrderStatus.SHIPPED)

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump(mode='json')
        data['total'] = float(self.total)
        for line, item in zip(data['items'], self.items):
            line['price'] = float(item.price)
        return data
