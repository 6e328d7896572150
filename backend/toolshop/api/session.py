"""
Session API endpoints
- Customer login (mobile number) and logout
- Admin login
- Price tier and recently viewed products
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from toolshop.core.exceptions import InvalidMobileNumberError
from toolshop.core.store import ShopStore, get_store
from toolshop.domain.product import PriceTier


router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class LoginRequest(BaseModel):
    mobile: str


class AdminLoginRequest(BaseModel):
    username: str
    password: str


class PriceTierUpdate(BaseModel):
    tier: PriceTier


class CategoryFilterUpdate(BaseModel):
    category: Optional[str] = "all"


def _session_payload(store: ShopStore) -> dict:
    session = store.session
    return {
        "user": session.user.model_dump() if session.user else None,
        "is_admin": session.is_admin,
        "price_tier": session.price_tier.value,
        "effective_price_tier": store.effective_price_tier.value,
        "category_filter": session.category_filter,
        "selected_product_id": session.selected_product_id,
        "recently_viewed": session.recently_viewed,
    }


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/")
async def get_session(store: ShopStore = Depends(get_store)):
    return {"status": "success", "data": _session_payload(store)}


@router.post("/login")
async def login(data: LoginRequest, store: ShopStore = Depends(get_store)):
    """Customer login: any mobile number shaped 09XXXXXXXXX is accepted"""
    try:
        store.login(data.mobile)
    except InvalidMobileNumberError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"status": "success", "data": _session_payload(store)}


@router.post("/admin-login")
async def admin_login(data: AdminLoginRequest, store: ShopStore = Depends(get_store)):
    """Admin login against the configured credentials"""
    if not store.admin_login(data.username, data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return {"status": "success", "data": _session_payload(store)}


@router.post("/logout")
async def logout(store: ShopStore = Depends(get_store)):
    store.logout()
    return {"status": "success", "data": _session_payload(store)}


@router.put("/price-tier")
async def set_price_tier(data: PriceTierUpdate, store: ShopStore = Depends(get_store)):
    """
    Store the price tier preference

    Visitors who are not signed in keep seeing retail prices; the
    preference applies once they sign in.
    """
    store.set_price_tier(data.tier)
    return {"status": "success", "data": _session_payload(store)}


@router.put("/category-filter")
async def set_category_filter(data: CategoryFilterUpdate, store: ShopStore = Depends(get_store)):
    store.set_category_filter(data.category)
    return {"status": "success", "data": _session_payload(store)}


@router.get("/recently-viewed")
async def get_recently_viewed(store: ShopStore = Depends(get_store)):
    """Recently viewed products, most recent first"""
    tier = store.effective_price_tier
    products = store.recently_viewed_products()
    return {
        "status": "success",
        "count": len(products),
        "data": [p.to_dict(tier) for p in products],
    }
