"""Order history API routes"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.context import AuthContext, Notifier
from ..services.order_client import OrderClient
from ..services.order_list import ALL, OrderListViewModel
from .dependencies import get_auth, get_order_client

router = APIRouter(tags=["Orders"])


class StatusUpdateRequest(BaseModel):
    """Request to change an order's status"""
    status: str


def render_orders(view_model: OrderListViewModel) -> dict:
    return {
        "filter": view_model.filter,
        "orders": [order.model_dump() for order in view_model.visible],
        "counts": view_model.counts,
        "notifications": [
            {"level": n.level, "message": n.message}
            for n in view_model.notifier.drain()
        ],
    }


async def load_orders(
    client: OrderClient,
    auth: AuthContext,
    status: str,
    admin: bool = False,
) -> OrderListViewModel:
    view_model = OrderListViewModel(client, auth, Notifier(), admin=admin)
    await view_model.load()
    view_model.set_filter(status)
    return view_model


@router.get("/api/orders")
async def list_my_orders(
    status: str = ALL,
    auth: AuthContext = Depends(get_auth),
    client: OrderClient = Depends(get_order_client),
):
    """The caller's order history, filtered by status"""
    if not auth.is_authenticated:
        raise HTTPException(status_code=401, detail="Please log in to view your orders")

    view_model = await load_orders(client, auth, status)
    return render_orders(view_model)


@router.get("/api/admin/orders")
async def list_all_orders(
    status: str = ALL,
    auth: AuthContext = Depends(get_auth),
    client: OrderClient = Depends(get_order_client),
):
    """Every order, filtered by status"""
    if not auth.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")

    view_model = await load_orders(client, auth, status, admin=True)
    return render_orders(view_model)


@router.put("/api/admin/orders/{order_id}/status")
async def update_order_status(
    order_id: str,
    request: StatusUpdateRequest,
    auth: AuthContext = Depends(get_auth),
    client: OrderClient = Depends(get_order_client),
):
    """Change an order's status; the order API decides if it is allowed"""
    if not auth.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")

    view_model = OrderListViewModel(client, auth, Notifier(), admin=True)
    result = await view_model.update_status(order_id, request.status)

    content = result.to_dict()
    content["notifications"] = [
        {"level": n.level, "message": n.message} for n in view_model.notifier.drain()
    ]
    return JSONResponse(
        content=content,
        status_code=200 if result.success else 400,
    )
