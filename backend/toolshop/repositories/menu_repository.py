"""
Menu Repository - Data Access Layer for navigation menus and their items

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import Iterable, List, Optional

from toolshop.core.exceptions import NotFoundError
from toolshop.domain.menu import Menu, MenuItem
from toolshop.repositories.base import InMemoryRepository

logger = logging.getLogger(__name__)


class MenuRepository(InMemoryRepository[Menu]):
    """
    Repository for menus

    Menu items are kept in a second flat list owned by the same
    repository; they are only ever replaced menu by menu.
    """

    model = Menu
    entity_name = "Menu"

    def __init__(
        self,
        menus: Optional[Iterable[Menu]] = None,
        items: Optional[Iterable[MenuItem]] = None,
    ):
        super().__init__(menus)
        self._items: List[MenuItem] = [i.model_copy(deep=True) for i in (items or [])]

    def find_by_location(self, location: str) -> Optional[Menu]:
        """First menu placed at the given location"""
        matches = self.find_where(lambda m: m.location == location)
        return matches[0] if matches else None

    def all_items(self) -> List[MenuItem]:
        return [i.model_copy(deep=True) for i in self._items]

    def items_for(self, menu_id: int) -> List[MenuItem]:
        """Committed items of a menu, sorted by their order field"""
        items = [i.model_copy(deep=True) for i in self._items if i.menu_id == menu_id]
        return sorted(items, key=lambda i: i.order)

    def replace_items(self, menu_id: int, items: Iterable[MenuItem]) -> List[MenuItem]:
        """
        Replace every item of a menu in a single assignment.

        Items of other menus keep their relative position ahead of the
        replaced ones.
        """
        if self.find_by_id(menu_id) is None:
            raise NotFoundError("Menu", menu_id)

        new_items = [i.model_copy(deep=True) for i in items]
        for item in new_items:
            if item.menu_id != menu_id:
                raise ValueError(f"Menu item {item.id} belongs to menu {item.menu_id}, not {menu_id}")

        self._items = [i for i in self._items if i.menu_id != menu_id] + new_items
        logger.info(f"Menu {menu_id} saved with {len(new_items)} items")
        return [i.model_copy(deep=True) for i in new_items]
