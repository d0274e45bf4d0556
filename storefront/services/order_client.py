"""
Order Transport Client

Creates, lists and updates orders on the remote order API.
No retries: each call is sent exactly once.
"""

import logging
from typing import Union

from ..models.checkout import OrderCreateRequest
from ..models.order import OrderStatus
from ..models.result import Failure, Result, Success
from .api_client import ApiClient

logger = logging.getLogger(__name__)


class OrderClient(ApiClient):
    """
    Client for the order endpoints.

    Usage:
        client = OrderClient(base_url="http://localhost:8080/WebViva")
        result = await client.create_order(request)
        if result.success:
            order_number = result.data["orderNumber"]
    """

    async def create_order(self, request: OrderCreateRequest) -> Result:
        """
        Create an order.

        Not idempotent: identical payloads create distinct orders, so the
        caller must prevent re-submission while a call is in flight.
        """
        result = await self._call(
            "POST",
            "/orders",
            form=request.to_form(),
            default_error="Failed to create order",
        )
        if result.success:
            data = result.data if isinstance(result.data, dict) else {}
            logger.info(
                f"Order {data.get('orderNumber')} created for user {request.user_id}: "
                f"${request.total_amount:.2f}"
            )
        return result

    async def list_all_orders(self) -> Result:
        """List every order (admin scope, no pagination)"""
        result = await self._call("GET", "/orders", default_error="Failed to fetch orders")
        return self._as_list(result)

    async def list_user_orders(self, user_id: Union[int, str]) -> Result:
        """List one user's orders; a user with no orders gets an empty list"""
        result = await self._call(
            "GET",
            f"/orders/user/{user_id}",
            default_error="Failed to fetch orders",
        )
        return self._as_list(result)

    async def get_order(self, order_id: Union[int, str]) -> Result:
        """Get order details"""
        return await self._call(
            "GET",
            f"/orders/{order_id}",
            default_error="Failed to fetch order details",
        )

    async def update_order_status(
        self,
        order_id: Union[int, str],
        status: Union[OrderStatus, str],
    ) -> Result:
        """
        Update an order's status.

        The server decides whether the transition is legal; only membership
        in OrderStatus is checked here.
        """
        parsed = OrderStatus.parse(status)
        if parsed is None:
            logger.warning(f"Refusing status update for order {order_id}: {status!r}")
            return Failure(error=f"Unknown order status: {status}")

        return await self._call(
            "PUT",
            f"/orders/{order_id}/status",
            form={"status": parsed.value.upper()},
            default_error="Failed to update order status",
        )

    @staticmethod
    def _as_list(result: Result) -> Result:
        if not result.success:
            return result
        if not isinstance(result.data, list):
            return Success(data=[])
        return result
