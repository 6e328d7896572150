"""
Unit tests for MenuEditor (working-copy menu editing)

Author: TM3
Date: 2026-10-19
"""
import pytest

from toolshop.core.exceptions import HierarchyCycleError, NotFoundError
from toolshop.domain.category import Category
from toolshop.domain.menu import Menu, MenuItemCreate, PageLink
from toolshop.repositories.menu_repository import MenuRepository
from toolshop.services.menu_service import MenuEditor, header_menu_tree, menu_hierarchy


@pytest.fixture
def repository(make_menu_item):
    """Header menu with A, B, C at the top level and D under B"""
    return MenuRepository(
        menus=[Menu(id=1, name="Main", location="header")],
        items=[
            make_menu_item(1, order=1, title="A"),
            make_menu_item(2, order=2, title="B"),
            make_menu_item(4, order=1, parent_id=2, title="D"),
            make_menu_item(3, order=3, title="C"),
        ],
    )


@pytest.fixture
def editor(repository):
    return MenuEditor(repository, 1)


def _ids(editor):
    return [item.id for item in editor.items]


class TestMenuEditorLoading:

    def test_loads_items_sorted_by_order(self, editor):
        # order 1, 1, 2, 3 (stable for ties)
        assert _ids(editor) == [1, 4, 2, 3]

    def test_unknown_menu_raises(self, repository):
        with pytest.raises(NotFoundError):
            MenuEditor(repository, 99)

    def test_edits_do_not_leak_before_save(self, editor, repository):
        """Test the working copy is independent from the store"""
        editor.outdent(4)
        editor.items[0].title = "Changed"

        committed = {i.id: i for i in repository.items_for(1)}
        assert committed[4].parent_id == 2
        assert committed[1].title == "A"

    def test_reload_discards_changes(self, editor):
        editor.remove(2)
        editor.reload()

        assert sorted(_ids(editor)) == [1, 2, 3, 4]


class TestMenuEditorAdd:

    def test_add_item_gets_next_order(self, editor):
        item = editor.add_item(MenuItemCreate(title="Blog", type="custom", value="https://example.com"))

        assert item.order == 4
        assert item.menu_id == 1
        assert editor.items[-1].id == item.id

    def test_add_item_to_empty_menu_starts_at_one(self):
        repository = MenuRepository(menus=[Menu(id=7, name="Footer", location="footer")], items=[])
        editor = MenuEditor(repository, 7)

        item = editor.add_item(MenuItemCreate(title="Home", type="page", value="home"))

        assert item.order == 1

    def test_add_page(self, editor):
        item = editor.add_page(PageLink(view="cart", title="Cart"))

        assert (item.type, item.value, item.title) == ("page", "cart", "Cart")

    def test_add_category_uses_name_and_slug(self, editor):
        item = editor.add_category(Category(id=9, name="Hand Tools", slug="hand-tools"))

        assert (item.type, item.value, item.title) == ("category", "hand-tools", "Hand Tools")

    def test_add_custom_link(self, editor):
        item = editor.add_custom_link("https://example.com/blog", "Blog")

        assert (item.type, item.value, item.title) == ("custom", "https://example.com/blog", "Blog")


class TestMenuEditorReorder:

    def test_move_up_swaps_with_previous(self, editor):
        editor.move_up(3)

        assert _ids(editor) == [1, 4, 3, 2]

    def test_move_up_first_is_noop(self, editor):
        editor.move_up(1)

        assert _ids(editor) == [1, 4, 2, 3]

    def test_move_down_last_is_noop(self, editor):
        editor.move_down(3)

        assert _ids(editor) == [1, 4, 2, 3]

    def test_move_crosses_depth_boundaries(self, editor):
        """Test a top-level item can swap with a nested neighbour; parent_id is untouched"""
        editor.move_down(1)

        assert _ids(editor) == [4, 1, 2, 3]
        assert editor.items[0].parent_id == 2

    def test_unknown_item_raises(self, editor):
        with pytest.raises(NotFoundError):
            editor.move_up(999)

    def test_indent_uses_previous_flat_entry(self, editor):
        editor.indent(3)

        assert editor.items[3].parent_id == 2

    def test_indent_first_is_noop(self, editor):
        editor.indent(1)

        assert editor.items[0].parent_id is None

    def test_indent_rejects_cycle(self, editor):
        """Test nesting an item under its own descendant raises"""
        # Bring D (child of B) directly in front of B
        editor.move_up(2)
        editor.move_up(2)
        editor.move_up(4)
        editor.move_up(4)
        assert _ids(editor) == [4, 2, 1, 3]

        with pytest.raises(HierarchyCycleError):
            editor.indent(2)
        assert editor.items[1].parent_id is None

    def test_outdent_goes_to_root(self, make_menu_item):
        repository = MenuRepository(
            menus=[Menu(id=1, name="Main", location="header")],
            items=[
                make_menu_item(1, order=1),
                make_menu_item(2, order=1, parent_id=1),
                make_menu_item(3, order=1, parent_id=2),
            ],
        )
        editor = MenuEditor(repository, 1)

        editor.outdent(3)

        assert editor.items[2].parent_id is None

    def test_hierarchy_follows_working_list(self, editor):
        editor.move_up(3)

        assert [(e.item.id, e.depth) for e in editor.hierarchy()] == [(1, 0), (3, 0), (2, 0), (4, 1)]


class TestMenuEditorRemove:

    def test_remove_drops_direct_children(self, editor):
        editor.remove(2)

        assert _ids(editor) == [1, 3]

    def test_remove_keeps_grandchildren(self, make_menu_item):
        repository = MenuRepository(
            menus=[Menu(id=1, name="Main", location="header")],
            items=[
                make_menu_item(1, order=1),
                make_menu_item(2, order=1, parent_id=1),
                make_menu_item(3, order=1, parent_id=2),
            ],
        )
        editor = MenuEditor(repository, 1)

        editor.remove(1)

        assert _ids(editor) == [3]
        assert editor.hierarchy() == []

    def test_remove_unknown_raises(self, editor):
        with pytest.raises(NotFoundError):
            editor.remove(999)


class TestMenuEditorSave:

    def test_save_renumbers_in_working_order(self, editor, repository):
        """Test order becomes 1..N following the flat list"""
        editor.move_up(3)

        saved = editor.save()

        assert [(i.id, i.order) for i in saved] == [(1, 1), (4, 2), (3, 3), (2, 4)]
        committed = repository.items_for(1)
        assert [(i.id, i.order) for i in committed] == [(1, 1), (4, 2), (3, 3), (2, 4)]

    def test_save_commits_removals(self, editor, repository):
        editor.remove(2)
        editor.save()

        assert [i.id for i in repository.items_for(1)] == [1, 3]

    def test_header_menu_reflects_save(self, editor, repository):
        editor.indent(3)
        editor.save()

        roots = header_menu_tree(repository)

        assert [n.item.id for n in roots] == [1, 2]
        assert [n.item.id for n in roots[1].children] == [4, 3]


class TestMenuViews:

    def test_header_menu_tree(self, repository):
        roots = header_menu_tree(repository)

        assert [n.item.title for n in roots] == ["A", "B", "C"]
        assert [n.item.title for n in roots[1].children] == ["D"]

    def test_header_menu_tree_without_header_menu(self):
        repository = MenuRepository(menus=[Menu(id=1, name="Footer", location="footer")], items=[])

        assert header_menu_tree(repository) == []

    def test_menu_hierarchy_unknown_menu(self, repository):
        with pytest.raises(NotFoundError):
            menu_hierarchy(repository, 42)
