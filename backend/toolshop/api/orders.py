"""
Orders API Endpoints
Order history, dashboards and admin status updates

Author: TM3
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from toolshop.core.auth import get_current_user, require_admin
from toolshop.core.exceptions import NotFoundError
from toolshop.core.store import ShopStore, get_store
from toolshop.domain.order import OrderStatus
from toolshop.domain.user import User
from toolshop.services import dashboard_service

router = APIRouter()


class StatusUpdate(BaseModel):
    status: OrderStatus


@router.get("/")
async def get_orders(store: ShopStore = Depends(get_store)):
    orders = store.orders.find_all()
    return {
        "status": "success",
        "count": len(orders),
        "data": [o.to_dict() for o in orders],
    }


@router.get("/dashboard")
async def get_customer_dashboard(
    user: User = Depends(get_current_user),
    store: ShopStore = Depends(get_store),
):
    """Order count, total spent and open orders for the signed-in customer"""
    return {
        "status": "success",
        "user": user.model_dump(),
        "data": dashboard_service.customer_summary(store.orders.find_all()),
    }


@router.get("/admin-dashboard")
async def get_admin_dashboard(store: ShopStore = Depends(require_admin)):
    """
    Admin console summary

    Returns:
    - Latest order total and count
    - Pending (processing) orders
    - Product count
    - Top three products by quantity sold
    """
    return {
        "status": "success",
        "data": dashboard_service.admin_summary(store.orders.find_all(), store.products.find_all()),
    }


@router.get("/{order_id}")
async def get_order(order_id: str, store: ShopStore = Depends(get_store)):
    order = store.orders.find_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return {"status": "success", "data": order.to_dict()}


@router.patch("/{order_id}/status")
async def update_order_status(order_id: str, data: StatusUpdate, store: ShopStore = Depends(require_admin)):
    try:
        order = store.update_order_status(order_id, data.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "data": order.to_dict()}
