"""
Cart Domain Models

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal

from toolshop.domain.product import Product


class CartItem(BaseModel):
    """A cart entry; unique per product_id. Weak reference to the product."""

    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(1, description="Quantity", ge=1)

    model_config = ConfigDict(from_attributes=True)


class CartLine(BaseModel):
    """Cart entry joined with its product at the effective price tier"""

    product: Product
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    def to_dict(self) -> dict:
        return {
            'product_id': self.product.id,
            'name': self.product.name,
            'sku': self.product.sku,
            'image': self.product.image,
            'quantity': self.quantity,
            'unit_price': float(self.unit_price),
            'line_total': float(self.line_total),
        }
