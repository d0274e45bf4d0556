"""Checkout API routes"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends, HTTPException
from pydantic import BaseModel

from ..core.config import settings
from ..core.context import AuthContext, CartContext
from ..core.session import CheckoutSession, session_manager
from ..models.cart import CartItem, CartTotals
from ..services.checkout_wizard import CheckoutWizard
from ..services.order_client import OrderClient
from ..services.profile_client import ProfileClient
from .dependencies import get_auth, get_order_client, get_profile_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


class StartCheckoutRequest(BaseModel):
    """Cart handed over by the storefront when checkout opens"""
    items: list[CartItem] = []


class CheckoutView(BaseModel):
    """Wizard state as rendered by the checkout page"""
    session_id: str
    step: str
    in_flight: bool
    form: dict[str, str]
    missing_fields: list[str]
    items: list[CartItem]
    totals: CartTotals
    notifications: list[dict[str, str]]
    redirect: Optional[dict[str, Any]] = None


def render_view(session: CheckoutSession) -> CheckoutView:
    """Snapshot the session for the client; pending toasts are drained"""
    wizard = session.wizard
    route = session.navigator.current

    return CheckoutView(
        session_id=session.session_id,
        step=wizard.step.value,
        in_flight=wizard.in_flight,
        form=wizard.form.model_dump(by_alias=True),
        missing_fields=wizard.form.missing_fields(),
        items=session.cart.items,
        totals=session.cart.totals(),
        notifications=[
            {"level": n.level, "message": n.message}
            for n in session.notifier.drain()
        ],
        redirect={"path": route.path, "state": route.state} if route else None,
    )


def get_checkout_session(session_id: str) -> CheckoutSession:
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Checkout session not found")
    session.touch()
    return session


@router.post("", response_model=CheckoutView)
async def start_checkout(
    request: StartCheckoutRequest,
    background_tasks: BackgroundTasks,
    auth: AuthContext = Depends(get_auth),
    client: OrderClient = Depends(get_order_client),
    profile_client: ProfileClient = Depends(get_profile_client),
):
    """
    Open a checkout session.

    The profile prefill runs after the response is sent; a redirect is
    returned instead when the user is anonymous or the cart is empty.
    """
    session_manager.cleanup_old_sessions()

    def make_wizard(auth, cart, notifier, navigator) -> CheckoutWizard:
        return CheckoutWizard(
            client=client,
            auth=auth,
            cart=cart,
            notifier=notifier,
            navigator=navigator,
            payment_method=settings.default_payment_method,
            overwrite_edited_fields=settings.prefill_overwrite_edited_fields,
        )

    session = session_manager.create_session(
        auth=auth,
        cart=CartContext(request.items),
        wizard_factory=make_wizard,
    )

    if session.wizard.check_access():
        background_tasks.add_task(session.wizard.prefill, profile_client)

    logger.info(f"Checkout session {session.session_id} opened for user {auth.user_id}")
    return render_view(session)


@router.get("/{session_id}", response_model=CheckoutView)
async def get_checkout(session: CheckoutSession = Depends(get_checkout_session)):
    """Get checkout state"""
    return render_view(session)


@router.patch("/{session_id}/shipping", response_model=CheckoutView)
async def update_shipping(
    fields: dict[str, str] = Body(...),
    session: CheckoutSession = Depends(get_checkout_session),
):
    """Edit shipping fields (snake_case or camelCase names)"""
    try:
        session.wizard.update_fields(fields)
    except KeyError as e:
        raise HTTPException(status_code=422, detail=str(e.args[0]))
    return render_view(session)


@router.post("/{session_id}/next", response_model=CheckoutView)
async def next_step(session: CheckoutSession = Depends(get_checkout_session)):
    """Advance to review once every required shipping field is filled"""
    missing = session.wizard.form.missing_fields()
    if missing:
        raise HTTPException(
            status_code=422,
            detail={"message": "Missing required fields", "missing_fields": missing},
        )
    session.wizard.next_step()
    return render_view(session)


@router.post("/{session_id}/back", response_model=CheckoutView)
async def previous_step(session: CheckoutSession = Depends(get_checkout_session)):
    """Return to the shipping step"""
    session.wizard.previous_step()
    return render_view(session)


@router.post("/{session_id}/submit", response_model=CheckoutView)
async def submit_order(session: CheckoutSession = Depends(get_checkout_session)):
    """Place the order"""
    await session.wizard.submit()
    return render_view(session)


@router.delete("/{session_id}")
async def delete_checkout(session_id: str):
    """Delete a checkout session"""
    if session_manager.delete_session(session_id):
        return {"message": "Session deleted"}
    raise HTTPException(status_code=404, detail="Checkout session not found")
