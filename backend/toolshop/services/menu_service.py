"""
Menu Service
Working-copy editing of navigation menus and header menu rendering

The editor works on a flat list of one menu's items, loaded in `order`
sequence. Position in that list is what move/indent operate on; the
depth-annotated hierarchy is only a view over it. Nothing reaches the
committed store until save().

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import List

from toolshop.core.exceptions import HierarchyCycleError, NotFoundError
from toolshop.domain.category import Category
from toolshop.domain.menu import MenuItem, MenuItemCreate, PageLink
from toolshop.repositories.base import timestamp_id
from toolshop.repositories.menu_repository import MenuRepository
from toolshop.services.hierarchy_service import (
    HierarchyEntry,
    TreeNode,
    build_hierarchy,
    build_tree,
    would_create_cycle,
)

logger = logging.getLogger(__name__)


class MenuEditor:
    """
    Unsaved edit buffer for a single menu

    Usage:
        editor = MenuEditor(menu_repository, menu_id=1)
        editor.indent(4)
        editor.move_up(4)
        editor.save()
    """

    def __init__(self, repository: MenuRepository, menu_id: int):
        if repository.find_by_id(menu_id) is None:
            raise NotFoundError("Menu", menu_id)
        self.repository = repository
        self.menu_id = menu_id
        self.items: List[MenuItem] = repository.items_for(menu_id)

    def reload(self) -> None:
        """Discard unsaved changes"""
        self.items = self.repository.items_for(self.menu_id)

    def _index_of(self, item_id: int) -> int:
        for index, item in enumerate(self.items):
            if item.id == item_id:
                return index
        raise NotFoundError("Menu item", item_id)

    # ------------------------------------------------------------------
    # Adding items
    # ------------------------------------------------------------------

    def add_item(self, data: MenuItemCreate) -> MenuItem:
        """Append an item; it gets the next order after the current maximum"""
        next_order = max((i.order for i in self.items), default=0) + 1
        item = MenuItem(
            id=timestamp_id(),
            menu_id=self.menu_id,
            order=next_order,
            **data.model_dump(),
        )
        self.items.append(item)
        return item

    def add_page(self, page: PageLink) -> MenuItem:
        return self.add_item(MenuItemCreate(title=page.title, type="page", value=page.view))

    def add_category(self, category: Category) -> MenuItem:
        return self.add_item(MenuItemCreate(title=category.name, type="category", value=category.slug))

    def add_custom_link(self, url: str, text: str) -> MenuItem:
        return self.add_item(MenuItemCreate(title=text, type="custom", value=url))

    # ------------------------------------------------------------------
    # Reordering
    # ------------------------------------------------------------------

    def move_up(self, item_id: int) -> None:
        """
        Swap with the previous entry of the flat list.

        The neighbour may sit at another depth or under another parent;
        the swap happens anyway and parent_id is left untouched.
        """
        index = self._index_of(item_id)
        if index > 0:
            self.items[index - 1], self.items[index] = self.items[index], self.items[index - 1]

    def move_down(self, item_id: int) -> None:
        """Swap with the next entry of the flat list (same caveat as move_up)"""
        index = self._index_of(item_id)
        if index < len(self.items) - 1:
            self.items[index + 1], self.items[index] = self.items[index], self.items[index + 1]

    def indent(self, item_id: int) -> None:
        """Make the item a child of the entry right before it in the flat list"""
        index = self._index_of(item_id)
        if index == 0:
            return

        new_parent_id = self.items[index - 1].id
        if would_create_cycle(self.items, item_id, new_parent_id):
            raise HierarchyCycleError(item_id, new_parent_id)
        self.items[index] = self.items[index].model_copy(update={'parent_id': new_parent_id})

    def outdent(self, item_id: int) -> None:
        """Promote the item to the top level (not to its grandparent)"""
        index = self._index_of(item_id)
        self.items[index] = self.items[index].model_copy(update={'parent_id': None})

    def remove(self, item_id: int) -> None:
        """
        Drop the item and its direct children.

        Grandchildren stay in the working list with a dangling parent_id
        and drop out of the hierarchy view.
        """
        self._index_of(item_id)
        self.items = [i for i in self.items if i.id != item_id and i.parent_id != item_id]

    # ------------------------------------------------------------------
    # Views and commit
    # ------------------------------------------------------------------

    def hierarchy(self) -> List[HierarchyEntry[MenuItem]]:
        """Depth-annotated display of the working list"""
        return build_hierarchy(self.items, use_order=False)

    def save(self) -> List[MenuItem]:
        """
        Renumber order 1..N in working-list sequence and replace the
        menu's committed items in one operation.
        """
        self.items = [
            item.model_copy(update={'order': position})
            for position, item in enumerate(self.items, start=1)
        ]
        saved = self.repository.replace_items(self.menu_id, self.items)
        logger.info(f"Menu {self.menu_id} working copy committed ({len(saved)} items)")
        return saved


def header_menu_tree(repository: MenuRepository, location: str = "header") -> List[TreeNode[MenuItem]]:
    """Nested items of the menu rendered at `location`; empty if there is none"""
    menu = repository.find_by_location(location)
    if menu is None:
        return []
    return build_tree(repository.items_for(menu.id), use_order=True)


def menu_hierarchy(repository: MenuRepository, menu_id: int) -> List[HierarchyEntry[MenuItem]]:
    """Depth-annotated view of a menu's committed items"""
    if repository.find_by_id(menu_id) is None:
        raise NotFoundError("Menu", menu_id)
    return build_hierarchy(repository.items_for(menu_id), use_order=True)
