"""
Product Domain Model

Represents a tool sold in the storefront.
This is the single source of truth for product data structure.

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from enum import Enum


class PriceTier(str, Enum):
    """Pricing modes applied uniformly to catalog and cart views"""
    RETAIL = "retail"
    WHOLESALE = "wholesale"


class ProductPrices(BaseModel):
    """Per-tier prices of a product"""
    retail: Decimal = Field(..., description="Retail price", ge=0)
    wholesale: Decimal = Field(..., description="Wholesale price", ge=0)

    def for_tier(self, tier: PriceTier) -> Decimal:
        return self.retail if PriceTier(tier) == PriceTier.RETAIL else self.wholesale


class Product(BaseModel):
    """
    Product domain model - represents a tool in our catalog

    Fields:
        id: Internal product ID (timestamp-derived for admin-created products)
        sku: Stock Keeping Unit
        name: Product name
        image: Main image reference (URL or data URL)
        gallery: Ordered list of image references
        stock: Units available (never negative)
        prices: Retail and wholesale prices
        category: Free-text category name (not a foreign key to Category.id)
        description: Product description
    """

    id: int = Field(..., description="Internal product ID")
    sku: str = Field(..., description="Stock Keeping Unit")
    name: str = Field(..., description="Product name")
    image: str = Field("", description="Main image reference")
    gallery: List[str] = Field(default_factory=list, description="Image gallery")
    stock: int = Field(0, description="Units in stock", ge=0)
    prices: ProductPrices = Field(..., description="Retail and wholesale prices")
    category: str = Field("", description="Product category name")
    description: str = Field("", description="Product description")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_out_of_stock(self) -> bool:
        """Check if product can no longer be added from listings"""
        return self.stock == 0

    def price_for(self, tier: PriceTier) -> Decimal:
        """Price at the given tier"""
        return self.prices.for_tier(tier)

    def to_dict(self, tier: Optional[PriceTier] = None) -> dict:
        """
        Convert to dictionary with computed fields

        When a tier is given the dict also carries `price`, the price
        shown to the current session.
        """
        data = self.model_dump()
        data['prices'] = {
            'retail': float(self.prices.retail),
            'wholesale': float(self.prices.wholesale),
        }
        data['is_out_of_stock'] = self.is_out_of_stock
        if tier is not None:
            data['price'] = float(self.price_for(tier))
        return data


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    sku: str
    name: str
    image: str = ""
    gallery: List[str] = Field(default_factory=list)
    stock: int = Field(0, ge=0)
    prices: ProductPrices
    category: str = ""
    description: str = ""
