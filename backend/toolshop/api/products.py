"""
Products API Endpoints
Catalog listing, quick price list, product detail and admin product management

Author: TM3
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from toolshop.core.auth import require_admin
from toolshop.core.exceptions import NotFoundError
from toolshop.core.store import ShopStore, get_store
from toolshop.domain.product import Product, ProductCreate
from toolshop.services import catalog_service

router = APIRouter()


@router.get("/")
async def get_products(
    category: str = Query("all", description="Category name, or 'all'"),
    search: str = Query("", description="Search by name or SKU"),
    min_price: Optional[str] = Query(None, description="Minimum retail price (blank = no bound)"),
    max_price: Optional[str] = Query(None, description="Maximum retail price (blank = no bound)"),
    sort_by: str = Query("default", description="default, price-asc, price-desc or name-asc"),
    store: ShopStore = Depends(get_store),
):
    """
    Get products for the shop page

    Filters apply to the retail price; each product also carries `price`
    at the session's effective tier.
    """
    try:
        products = catalog_service.filter_products(
            store.products.find_all(),
            category=category,
            search=search,
            min_price=min_price,
            max_price=max_price,
            sort_by=sort_by,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    tier = store.effective_price_tier
    return {
        "status": "success",
        "count": len(products),
        "price_tier": tier.value,
        "data": [p.to_dict(tier) for p in products],
    }


@router.get("/categories")
async def get_category_options(store: ShopStore = Depends(get_store)):
    """Category filter options: 'all' plus every category used by a product"""
    return {
        "status": "success",
        "data": catalog_service.category_options(store.products.find_all()),
    }


@router.get("/price-list")
async def get_price_list(
    search: str = Query("", description="Search by name or SKU"),
    store: ShopStore = Depends(get_store),
):
    """Quick price table at the effective tier"""
    tier = store.effective_price_tier
    rows = catalog_service.price_list(store.products.find_all(), search, tier, store.cart)
    return {
        "status": "success",
        "count": len(rows),
        "price_tier": tier.value,
        "data": rows,
    }


@router.get("/home")
async def get_home_feed(store: ShopStore = Depends(get_store)):
    """Featured products and new arrivals for the home page"""
    tier = store.effective_price_tier
    feed = catalog_service.home_feed(store.products.find_all())
    return {
        "status": "success",
        "price_tier": tier.value,
        "data": {
            section: [p.to_dict(tier) for p in products]
            for section, products in feed.items()
        },
    }


@router.get("/stats")
async def get_product_stats(store: ShopStore = Depends(require_admin)):
    """
    Get product statistics

    Returns:
    - Total products
    - Products by category
    - Stock levels
    """
    return {
        "status": "success",
        "data": store.products.get_stats(),
    }


@router.get("/{product_id}")
async def get_product(product_id: int, store: ShopStore = Depends(get_store)):
    """Get a single product"""
    product = store.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return {
        "status": "success",
        "data": product.to_dict(store.effective_price_tier),
    }


@router.post("/{product_id}/view")
async def view_product(product_id: int, store: ShopStore = Depends(get_store)):
    """Open a product detail page; records it in recently viewed"""
    try:
        product = store.view_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "status": "success",
        "data": product.to_dict(store.effective_price_tier),
        "recently_viewed": store.session.recently_viewed,
    }


@router.post("/", status_code=201)
async def create_product(data: ProductCreate, store: ShopStore = Depends(require_admin)):
    """Add a product to the catalog"""
    product = store.add_product(data)
    return {"status": "success", "data": product.to_dict()}


@router.put("/{product_id}")
async def replace_product(product_id: int, product: Product, store: ShopStore = Depends(require_admin)):
    """Replace a product record"""
    if product.id != product_id:
        raise HTTPException(status_code=400, detail="Product id in body does not match the URL")
    try:
        updated = store.update_product(product)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "data": updated.to_dict()}


@router.delete("/{product_id}")
async def delete_product(product_id: int, store: ShopStore = Depends(require_admin)):
    """Delete a product (no undo; cart entries are left in place)"""
    if not store.delete_product(product_id):
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return {"status": "success", "deleted": product_id}
