"""
Categories API Endpoints
Category hierarchy for the admin console

Author: TM3
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends, HTTPException

from toolshop.core.auth import require_admin
from toolshop.core.exceptions import HierarchyCycleError, InvalidParentError, NotFoundError
from toolshop.core.store import ShopStore, get_store
from toolshop.domain.category import Category, CategoryCreate

router = APIRouter()


@router.get("/")
async def get_categories(store: ShopStore = Depends(get_store)):
    """
    Get categories as a depth-annotated pre-order list

    Categories whose parent was deleted are not part of the hierarchy and
    are returned separately under `unreachable`.
    """
    try:
        entries = store.category_hierarchy()
    except HierarchyCycleError as e:
        raise HTTPException(status_code=500, detail=str(e))

    listed = {entry.item.id for entry in entries}
    unreachable = [c.to_dict() for c in store.categories.find_all() if c.id not in listed]
    return {
        "status": "success",
        "count": len(entries),
        "data": [entry.to_dict() for entry in entries],
        "unreachable": unreachable,
    }


@router.post("/", status_code=201)
async def create_category(data: CategoryCreate, store: ShopStore = Depends(require_admin)):
    try:
        category = store.add_category(data)
    except InvalidParentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "success", "data": category.to_dict()}


@router.put("/{category_id}")
async def replace_category(category_id: int, category: Category, store: ShopStore = Depends(require_admin)):
    """Replace a category; re-parenting under itself or a descendant is rejected"""
    if category.id != category_id:
        raise HTTPException(status_code=400, detail="Category id in body does not match the URL")
    try:
        updated = store.update_category(category)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidParentError, HierarchyCycleError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "success", "data": updated.to_dict()}


@router.delete("/{category_id}")
async def delete_category(category_id: int, store: ShopStore = Depends(require_admin)):
    """Delete a category and its direct subcategories (no undo)"""
    if not store.delete_category(category_id):
        raise HTTPException(status_code=404, detail=f"Category {category_id} not found")
    return {"status": "success", "deleted": category_id}
