"""
Cart API Endpoints

Author: TM3
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from toolshop.core.store import ShopStore, get_store

router = APIRouter()


# Request models
class CartAdd(BaseModel):
    product_id: int
    quantity: int = Field(1, ge=1)


class CartQuantityUpdate(BaseModel):
    quantity: int


def _cart_payload(store: ShopStore) -> dict:
    lines = store.get_cart_lines()
    return {
        "status": "success",
        "price_tier": store.effective_price_tier.value,
        "count": len(store.cart),
        "data": [line.to_dict() for line in lines],
        "total": float(store.get_cart_total()),
    }


@router.get("/")
async def get_cart(store: ShopStore = Depends(get_store)):
    """
    Get cart lines and total at the effective price tier

    Entries whose product was deleted are counted in `count` but have no
    line and add nothing to the total.
    """
    return _cart_payload(store)


@router.post("/items")
async def add_to_cart(data: CartAdd, store: ShopStore = Depends(get_store)):
    """Add a product, or increase its quantity if already in the cart"""
    if store.get_product_by_id(data.product_id) is None:
        raise HTTPException(status_code=404, detail=f"Product {data.product_id} not found")
    store.add_to_cart(data.product_id, data.quantity)
    return _cart_payload(store)


@router.put("/items/{product_id}")
async def update_cart_quantity(product_id: int, data: CartQuantityUpdate, store: ShopStore = Depends(get_store)):
    """Set a line's quantity exactly; zero or less removes it"""
    store.update_cart_quantity(product_id, data.quantity)
    return _cart_payload(store)


@router.delete("/items/{product_id}")
async def remove_from_cart(product_id: int, store: ShopStore = Depends(get_store)):
    store.remove_from_cart(product_id)
    return _cart_payload(store)


@router.delete("/")
async def clear_cart(store: ShopStore = Depends(get_store)):
    store.clear_cart()
    return _cart_payload(store)
