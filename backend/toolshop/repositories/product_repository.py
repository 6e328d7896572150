"""
Product Repository - Data Access Layer for Products

Holds the product catalog in memory and returns Product domain models.

Author: TM3
Date: 2026-10-19
"""
from collections import Counter
from typing import Dict, Optional

from toolshop.domain.product import Product
from toolshop.repositories.base import InMemoryRepository


class ProductRepository(InMemoryRepository[Product]):
    """
    Repository for Product data access

    Returns Product domain models, not raw dictionaries.
    """

    model = Product
    entity_name = "Product"

    def find_by_sku(self, sku: str) -> Optional[Product]:
        """
        Find product by SKU

        Args:
            sku: Product SKU

        Returns:
            Product or None if not found
        """
        matches = self.find_where(lambda p: p.sku == sku)
        return matches[0] if matches else None

    def index_by_id(self) -> Dict[int, Product]:
        """Products keyed by id, for joining cart items"""
        return {p.id: p for p in self.find_all()}

    def get_stats(self) -> dict:
        """
        Get product statistics

        Returns:
            Dictionary with total products, counts by category,
            out-of-stock count and total units in stock
        """
        products = self.find_all()
        by_category = Counter(p.category for p in products)

        return {
            'total_products': len(products),
            'by_category': [
                {'category': category, 'count': count}
                for category, count in by_category.most_common()
            ],
            'out_of_stock': sum(1 for p in products if p.is_out_of_stock),
            'total_units': sum(p.stock for p in products),
        }
