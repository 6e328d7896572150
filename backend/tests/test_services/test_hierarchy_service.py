"""
Unit tests for the hierarchy builder

Author: TM3
Date: 2026-10-19
"""
import pytest

from toolshop.core.exceptions import HierarchyCycleError
from toolshop.services.hierarchy_service import (
    ancestors_of,
    build_hierarchy,
    build_tree,
    find_unreachable,
    would_create_cycle,
)


def _flat(entries):
    return [(e.item.id, e.depth) for e in entries]


class TestBuildHierarchy:
    """Test pre-order flattening with depth"""

    def test_orders_siblings_and_nests_children(self, make_menu_item):
        """Test siblings sorted by order and children right after their parent"""
        # Arrange
        items = [
            make_menu_item(1, order=2),
            make_menu_item(2, order=1),
            make_menu_item(3, order=1, parent_id=1),
        ]

        # Act
        result = build_hierarchy(items)

        # Assert
        assert _flat(result) == [(2, 0), (1, 0), (3, 1)]

    def test_parent_followed_by_all_descendants(self, make_category):
        """Test a subtree is contiguous in the output"""
        categories = [
            make_category(1),
            make_category(2),
            make_category(3, parent_id=1),
            make_category(4, parent_id=3),
        ]

        result = build_hierarchy(categories)

        assert _flat(result) == [(1, 0), (3, 1), (4, 2), (2, 0)]

    def test_equal_orders_keep_input_order(self, make_menu_item):
        """Test the sibling sort is stable"""
        items = [make_menu_item(5, order=1), make_menu_item(4, order=1), make_menu_item(3, order=1)]

        result = build_hierarchy(items)

        assert [e.item.id for e in result] == [5, 4, 3]

    def test_use_order_false_keeps_input_sequence(self, make_menu_item):
        """Test the working-copy view ignores the order field"""
        items = [make_menu_item(1, order=3), make_menu_item(2, order=1)]

        result = build_hierarchy(items, use_order=False)

        assert [e.item.id for e in result] == [1, 2]

    def test_records_without_order_attribute(self, make_category):
        """Test categories (no order field) come out in input order"""
        categories = [make_category(3), make_category(1), make_category(2)]

        result = build_hierarchy(categories)

        assert [e.item.id for e in result] == [3, 1, 2]

    def test_dangling_parent_is_left_out(self, make_category):
        """Test a record whose parent is gone does not appear"""
        categories = [make_category(1), make_category(3, parent_id=2)]

        result = build_hierarchy(categories)

        assert _flat(result) == [(1, 0)]

    def test_cycle_members_are_unreachable(self, make_category):
        """Test a parent cycle terminates and its members are excluded"""
        categories = [
            make_category(1),
            make_category(2, parent_id=3),
            make_category(3, parent_id=2),
        ]

        result = build_hierarchy(categories)

        assert _flat(result) == [(1, 0)]
        assert {c.id for c in find_unreachable(categories)} == {2, 3}

    def test_duplicate_ids_raise(self, make_category):
        """Test reaching the same id twice raises instead of looping"""
        categories = [make_category(1), make_category(1)]

        with pytest.raises(HierarchyCycleError):
            build_hierarchy(categories)

    def test_empty_input(self):
        assert build_hierarchy([]) == []

    def test_does_not_modify_records(self, make_menu_item):
        items = [make_menu_item(1, order=2), make_menu_item(2, order=1)]

        build_hierarchy(items)

        assert [i.id for i in items] == [1, 2]

    def test_entry_to_dict_carries_depth(self, make_category):
        result = build_hierarchy([make_category(1), make_category(2, parent_id=1)])

        assert result[1].to_dict()['depth'] == 1
        assert result[1].to_dict()['parent_id'] == 1


class TestBuildTree:
    """Test nested tree rendering"""

    def test_nests_children(self, make_menu_item):
        items = [
            make_menu_item(1, order=1),
            make_menu_item(2, order=2),
            make_menu_item(3, order=1, parent_id=2),
            make_menu_item(4, order=1, parent_id=3),
        ]

        roots = build_tree(items)

        assert [n.item.id for n in roots] == [1, 2]
        assert roots[0].children == []
        assert [n.item.id for n in roots[1].children] == [3]
        assert [n.item.id for n in roots[1].children[0].children] == [4]

    def test_to_dict(self, make_menu_item):
        roots = build_tree([make_menu_item(1, order=1), make_menu_item(2, order=1, parent_id=1)])

        data = roots[0].to_dict()

        assert data['id'] == 1
        assert data['children'][0]['id'] == 2
        assert data['children'][0]['children'] == []


class TestCycleChecks:
    """Test ancestor walks and re-parenting checks"""

    def test_ancestors_nearest_first(self, make_category):
        categories = [make_category(1), make_category(2, parent_id=1), make_category(3, parent_id=2)]

        assert ancestors_of(categories, 3) == [2, 1]
        assert ancestors_of(categories, 1) == []

    def test_ancestors_stop_at_dangling_parent(self, make_category):
        categories = [make_category(3, parent_id=2)]

        assert ancestors_of(categories, 3) == []

    def test_ancestors_raise_on_loop(self, make_category):
        categories = [make_category(2, parent_id=3), make_category(3, parent_id=2)]

        with pytest.raises(HierarchyCycleError):
            ancestors_of(categories, 2)

    def test_would_create_cycle(self, make_category):
        categories = [make_category(1), make_category(2, parent_id=1), make_category(3, parent_id=2)]

        assert would_create_cycle(categories, 1, 3) is True
        assert would_create_cycle(categories, 1, 1) is True
        assert would_create_cycle(categories, 3, 1) is False
        assert would_create_cycle(categories, 2, None) is False
