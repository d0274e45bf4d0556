"""Shared route dependencies"""

from typing import Optional

from fastapi import Header

from ..core.config import settings
from ..core.context import AuthContext
from ..services.order_client import OrderClient
from ..services.profile_client import ProfileClient

# Created lazily, closed on shutdown
order_client: Optional[OrderClient] = None
profile_client: Optional[ProfileClient] = None


def get_order_client() -> OrderClient:
    """Get or create order client"""
    global order_client
    if order_client is None:
        order_client = OrderClient(
            base_url=settings.order_api_base_url,
            timeout=settings.request_timeout,
        )
    return order_client


def get_profile_client() -> ProfileClient:
    """Get or create profile client"""
    global profile_client
    if profile_client is None:
        profile_client = ProfileClient(
            base_url=settings.order_api_base_url,
            timeout=settings.request_timeout,
        )
    return profile_client


def get_auth(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> AuthContext:
    """Auth context from headers set by the upstream auth layer"""
    return AuthContext(
        user_id=x_user_id or None,
        is_admin=(x_user_role or "").lower() == "admin",
    )


async def close_clients() -> None:
    global order_client, profile_client
    for client in (order_client, profile_client):
        if client:
            await client.close()
    order_client = None
    profile_client = None
