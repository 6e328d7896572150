"""
Settings API Endpoints
Site identity, footer, shipping and payment methods
"""
from fastapi import APIRouter, Depends, HTTPException

from toolshop.core.auth import require_admin
from toolshop.core.exceptions import NotFoundError
from toolshop.core.store import ShopStore, get_store
from toolshop.domain.settings import (
    FooterSettings,
    GeneralSettings,
    PaymentMethod,
    PaymentMethodCreate,
    ShippingMethod,
    ShippingMethodCreate,
)

router = APIRouter()


@router.get("/")
async def get_settings(store: ShopStore = Depends(get_store)):
    return {"status": "success", "data": store.get_settings().to_dict()}


@router.get("/meta")
async def get_page_meta(store: ShopStore = Depends(get_store)):
    """Document title, meta description and favicon"""
    return {"status": "success", "data": store.page_meta.model_dump()}


@router.put("/general")
async def update_general(data: GeneralSettings, store: ShopStore = Depends(require_admin)):
    updated = store.update_general_settings(data)
    return {
        "status": "success",
        "data": updated.to_dict(),
        "meta": store.page_meta.model_dump(),
    }


@router.put("/footer")
async def update_footer(data: FooterSettings, store: ShopStore = Depends(require_admin)):
    updated = store.update_footer_settings(data)
    return {"status": "success", "data": updated.to_dict()}


# =============================================================================
# Shipping methods
# =============================================================================

@router.post("/shipping-methods", status_code=201)
async def add_shipping_method(data: ShippingMethodCreate, store: ShopStore = Depends(require_admin)):
    method = store.add_shipping_method(data)
    return {"status": "success", "data": method.model_dump(mode='json')}


@router.put("/shipping-methods/{method_id}")
async def update_shipping_method(method_id: int, method: ShippingMethod, store: ShopStore = Depends(require_admin)):
    if method.id != method_id:
        raise HTTPException(status_code=400, detail="Shipping method id in body does not match the URL")
    try:
        store.update_shipping_method(method)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "data": method.model_dump(mode='json')}


@router.delete("/shipping-methods/{method_id}")
async def delete_shipping_method(method_id: int, store: ShopStore = Depends(require_admin)):
    if not store.delete_shipping_method(method_id):
        raise HTTPException(status_code=404, detail=f"Shipping method {method_id} not found")
    return {"status": "success", "deleted": method_id}


# =============================================================================
# Payment methods
# =============================================================================

@router.post("/payment-methods", status_code=201)
async def add_payment_method(data: PaymentMethodCreate, store: ShopStore = Depends(require_admin)):
    method = store.add_payment_method(data)
    return {"status": "success", "data": method.model_dump()}


@router.put("/payment-methods/{method_id}")
async def update_payment_method(method_id: int, method: PaymentMethod, store: ShopStore = Depends(require_admin)):
    if method.id != method_id:
        raise HTTPException(status_code=400, detail="Payment method id in body does not match the URL")
    try:
        store.update_payment_method(method)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "data": method.model_dump()}


@router.delete("/payment-methods/{method_id}")
async def delete_payment_method(method_id: int, store: ShopStore = Depends(require_admin)):
    if not store.delete_payment_method(method_id):
        raise HTTPException(status_code=404, detail=f"Payment method {method_id} not found")
    return {"status": "success", "deleted": method_id}
