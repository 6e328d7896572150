"""
Menus API Endpoints
Header navigation and the admin menu editor

The editor endpoints drive one working copy held by the store; changes
become visible in the header menu only after /editor/save.

Author: TM3
Date: 2026-10-19
"""
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from toolshop.core.auth import require_admin
from toolshop.core.exceptions import HierarchyCycleError, NotFoundError
from toolshop.core.store import ShopStore, get_store
from toolshop.domain.menu import MenuItemCreate
from toolshop.services.menu_service import MenuEditor, menu_hierarchy

router = APIRouter()


# Request models
class PageItemAdd(BaseModel):
    view: str


class CategoryItemAdd(BaseModel):
    category_id: int


class CustomLinkAdd(BaseModel):
    url: str = "https://"
    text: str


class ItemAction(BaseModel):
    action: Literal["up", "down", "indent", "outdent"]


def _editor_payload(editor: MenuEditor) -> dict:
    return {
        "status": "success",
        "menu_id": editor.menu_id,
        "data": [entry.to_dict() for entry in editor.hierarchy()],
        "items": [item.model_dump() for item in editor.items],
    }


@router.get("/")
async def get_menus(store: ShopStore = Depends(get_store)):
    menus = store.menus.find_all()
    return {
        "status": "success",
        "count": len(menus),
        "data": [m.model_dump() for m in menus],
    }


@router.get("/header")
async def get_header_menu(store: ShopStore = Depends(get_store)):
    """Nested header navigation, siblings in saved order"""
    return {
        "status": "success",
        "data": [node.to_dict() for node in store.header_menu()],
    }


@router.get("/pages")
async def get_available_pages(store: ShopStore = Depends(get_store)):
    """Pages that can be linked from a menu"""
    return {
        "status": "success",
        "data": [page.model_dump() for page in store.available_pages],
    }


@router.get("/{menu_id}/items")
async def get_menu_items(menu_id: int, store: ShopStore = Depends(get_store)):
    """Committed items of a menu, depth-annotated"""
    try:
        entries = menu_hierarchy(store.menus, menu_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "status": "success",
        "count": len(entries),
        "data": [entry.to_dict() for entry in entries],
    }


# =============================================================================
# Working copy editor (admin)
# =============================================================================

def _editor(store: ShopStore) -> MenuEditor:
    try:
        return store.require_menu_editor()
    except NotFoundError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/{menu_id}/editor")
async def open_editor(menu_id: int, store: ShopStore = Depends(require_admin)):
    """Start editing a menu; discards any unsaved working copy"""
    try:
        editor = store.open_menu_editor(menu_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _editor_payload(editor)


@router.get("/editor/current")
async def get_editor(store: ShopStore = Depends(require_admin)):
    return _editor_payload(_editor(store))


@router.post("/editor/items")
async def add_editor_item(data: MenuItemCreate, store: ShopStore = Depends(require_admin)):
    editor = _editor(store)
    editor.add_item(data)
    return _editor_payload(editor)


@router.post("/editor/pages")
async def add_editor_page(data: PageItemAdd, store: ShopStore = Depends(require_admin)):
    editor = _editor(store)
    page = next((p for p in store.available_pages if p.view == data.view), None)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Page {data.view} not found")
    editor.add_page(page)
    return _editor_payload(editor)


@router.post("/editor/categories")
async def add_editor_category(data: CategoryItemAdd, store: ShopStore = Depends(require_admin)):
    editor = _editor(store)
    category = store.categories.find_by_id(data.category_id)
    if category is None:
        raise HTTPException(status_code=404, detail=f"Category {data.category_id} not found")
    editor.add_category(category)
    return _editor_payload(editor)


@router.post("/editor/custom-links")
async def add_editor_custom_link(data: CustomLinkAdd, store: ShopStore = Depends(require_admin)):
    editor = _editor(store)
    editor.add_custom_link(data.url, data.text)
    return _editor_payload(editor)


@router.post("/editor/items/{item_id}/action")
async def editor_item_action(item_id: int, data: ItemAction, store: ShopStore = Depends(require_admin)):
    """
    Reorder an item of the working copy

    up/down swap with the neighbour in the flat list, indent nests under
    the previous entry, outdent moves to the top level.
    """
    editor = _editor(store)
    actions = {
        "up": editor.move_up,
        "down": editor.move_down,
        "indent": editor.indent,
        "outdent": editor.outdent,
    }
    try:
        actions[data.action](item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except HierarchyCycleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _editor_payload(editor)


@router.delete("/editor/items/{item_id}")
async def remove_editor_item(item_id: int, store: ShopStore = Depends(require_admin)):
    """Remove an item and its direct children from the working copy"""
    editor = _editor(store)
    try:
        editor.remove(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _editor_payload(editor)


@router.post("/editor/save")
async def save_editor(store: ShopStore = Depends(require_admin)):
    """Renumber and commit the working copy"""
    editor = _editor(store)
    saved = editor.save()
    return {
        "status": "success",
        "menu_id": editor.menu_id,
        "count": len(saved),
        "data": [item.model_dump() for item in saved],
    }


@router.post("/editor/discard")
async def discard_editor(store: ShopStore = Depends(require_admin)):
    editor = _editor(store)
    editor.reload()
    return _editor_payload(editor)
