"""HTML pages for checkout and order history"""

import os

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates

from ..core.config import settings
from ..core.context import AuthContext
from ..core.session import CheckoutSession
from ..services.order_client import OrderClient
from ..services.order_list import ALL
from .checkout import get_checkout_session, render_view
from .dependencies import get_auth, get_order_client
from .orders import load_orders

templates_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=templates_dir)

router = APIRouter(tags=["Pages"])

STATUS_TABS = ["all", "pending", "confirmed", "processing", "shipped", "delivered", "cancelled"]


@router.get("/checkout/{session_id}")
async def checkout_page(
    request: Request,
    session: CheckoutSession = Depends(get_checkout_session),
):
    """Checkout wizard page"""
    return templates.TemplateResponse(
        request,
        "checkout.html",
        {"title": settings.app_name, "view": render_view(session)},
    )


@router.get("/orders")
async def orders_page(
    request: Request,
    status: str = ALL,
    auth: AuthContext = Depends(get_auth),
    client: OrderClient = Depends(get_order_client),
):
    """Order history page"""
    view_model = None
    if auth.is_authenticated:
        view_model = await load_orders(client, auth, status)

    return templates.TemplateResponse(
        request,
        "orders.html",
        {
            "title": settings.app_name,
            "authenticated": auth.is_authenticated,
            "view_model": view_model,
            "tabs": STATUS_TABS,
        },
    )
