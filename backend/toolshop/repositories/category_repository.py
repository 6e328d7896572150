"""
Category Repository - Data Access Layer for Categories

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import Optional

from toolshop.domain.category import Category, CategoryCreate
from toolshop.repositories.base import InMemoryRepository, timestamp_id

logger = logging.getLogger(__name__)


class CategoryRepository(InMemoryRepository[Category]):
    """Repository for the category hierarchy"""

    model = Category
    entity_name = "Category"

    def add(self, data: CategoryCreate) -> Category:
        record = Category(
            id=timestamp_id(),
            name=data.name,
            slug=data.resolved_slug(),
            parent_id=data.parent_id,
        )
        self._records.append(record)
        logger.info(f"Category created: {record.id} ({record.slug})")
        return record.model_copy(deep=True)

    def find_by_slug(self, slug: str) -> Optional[Category]:
        matches = self.find_where(lambda c: c.slug == slug)
        return matches[0] if matches else None

    def delete(self, category_id: int) -> bool:
        """
        Remove a category together with its direct children.

        Only one level is removed: grandchildren stay in the collection
        with a parent_id that no longer resolves.
        """
        children = sum(1 for c in self._records if c.parent_id == category_id)
        before = len(self._records)
        self._records = [
            c for c in self._records
            if c.id != category_id and c.parent_id != category_id
        ]
        removed = before - len(self._records)
        if removed:
            logger.info(f"Category {category_id} deleted with {children} direct children")
        return removed > 0
