"""
Hierarchy Service
Builds ordered views over parent-pointer collections (categories, menu items)

A record takes part if it has `id` and `parent_id`; an `order` attribute,
when present, sequences siblings. Records are never modified here.

Author: TM3
Date: 2026-10-19
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, List, Optional, Sequence, Set, TypeVar

from toolshop.core.exceptions import HierarchyCycleError

T = TypeVar("T")


@dataclass
class HierarchyEntry(Generic[T]):
    """A record with its depth in the pre-order listing (0 for roots)"""
    item: T
    depth: int

    def to_dict(self) -> dict:
        data = self.item.model_dump(mode='json')
        data['depth'] = self.depth
        return data


@dataclass
class TreeNode(Generic[T]):
    """A record with its ordered children, for rendering submenus"""
    item: T
    children: List["TreeNode[T]"] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = self.item.model_dump(mode='json')
        data['children'] = [child.to_dict() for child in self.children]
        return data


def _children_index(records: Sequence[Any], use_order: bool) -> Dict[Optional[Any], List[Any]]:
    """Group records by parent_id, siblings in display order"""
    index: Dict[Optional[Any], List[Any]] = {}
    for record in records:
        index.setdefault(record.parent_id, []).append(record)

    if use_order:
        for siblings in index.values():
            # Stable: equal or missing orders keep input order
            siblings.sort(key=lambda r: (getattr(r, 'order', None) is None, getattr(r, 'order', None) or 0))
    return index


def build_hierarchy(records: Iterable[T], use_order: bool = True) -> List[HierarchyEntry[T]]:
    """
    Flatten a parent-pointer collection into a depth-annotated pre-order list.

    Each parent is immediately followed by all of its descendants. Records
    whose parent cannot be reached from a root (dangling parent_id, or a
    parent cycle) are left out; see find_unreachable.

    Args:
        records: Records with id / parent_id (and optionally order)
        use_order: Sequence siblings by `order`; otherwise by input order

    Raises:
        HierarchyCycleError: if an id is reached twice (duplicate ids)
    """
    records = list(records)
    index = _children_index(records, use_order)
    result: List[HierarchyEntry[T]] = []
    visited: Set[Any] = set()

    stack = [(root, 0) for root in reversed(index.get(None, []))]
    while stack:
        record, depth = stack.pop()
        if record.id in visited:
            raise HierarchyCycleError(record.id)
        visited.add(record.id)
        result.append(HierarchyEntry(item=record, depth=depth))
        for child in reversed(index.get(record.id, [])):
            stack.append((child, depth + 1))

    return result


def build_tree(records: Iterable[T], use_order: bool = True) -> List[TreeNode[T]]:
    """Nested form of build_hierarchy: one TreeNode per root"""
    roots: List[TreeNode[T]] = []
    path: List[TreeNode[T]] = []

    for entry in build_hierarchy(records, use_order=use_order):
        node = TreeNode(item=entry.item)
        del path[entry.depth:]
        if path:
            path[-1].children.append(node)
        else:
            roots.append(node)
        path.append(node)

    return roots


def find_unreachable(records: Iterable[T]) -> List[T]:
    """Records that build_hierarchy leaves out (orphans and cycle members)"""
    records = list(records)
    reachable = {entry.item.id for entry in build_hierarchy(records, use_order=False)}
    return [r for r in records if r.id not in reachable]


def ancestors_of(records: Iterable[T], node_id: Any) -> List[Any]:
    """
    Ids of the node's ancestors, nearest first.

    Stops at a root or at a dangling parent_id.

    Raises:
        HierarchyCycleError: if the parent chain loops
    """
    parents = {r.id: r.parent_id for r in records}
    chain: List[Any] = []
    seen = {node_id}
    current = parents.get(node_id)

    while current is not None and current in parents:
        if current in seen:
            raise HierarchyCycleError(current)
        seen.add(current)
        chain.append(current)
        current = parents[current]

    return chain


def would_create_cycle(records: Iterable[T], node_id: Any, new_parent_id: Optional[Any]) -> bool:
    """
    True if setting node_id's parent to new_parent_id makes the node its
    own ancestor. Walks up from the proposed parent.
    """
    if new_parent_id is None:
        return False
    if new_parent_id == node_id:
        return True

    parents = {r.id: r.parent_id for r in records}
    seen: Set[Any] = set()
    current = new_parent_id
    while current is not None and current not in seen:
        if current == node_id:
            return True
        seen.add(current)
        current = parents.get(current)
    return False
