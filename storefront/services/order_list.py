"""Order list filtering and the order-history view model"""

import logging
from typing import Iterable, Sequence, Union

from ..core.context import AuthContext, Notifier
from ..models.order import OrderRecord, OrderStatus
from ..models.result import Result
from .normalizer import normalize_orders
from .order_client import OrderClient

logger = logging.getLogger(__name__)

ALL = "all"


def filter_orders(
    orders: Sequence[OrderRecord],
    status_or_all: Union[OrderStatus, str],
) -> list[OrderRecord]:
    """
    Orders whose status matches the filter, case-insensitively.

    "all" passes every order through in its original order; a value outside
    OrderStatus matches nothing.
    """
    if isinstance(status_or_all, str) and status_or_all.strip().lower() == ALL:
        return list(orders)

    wanted = OrderStatus.parse(status_or_all)
    if wanted is None:
        return []

    return [order for order in orders if OrderStatus.parse(order.status) == wanted]


def count_by_status(orders: Iterable[OrderRecord]) -> dict[str, int]:
    """Per-status counts plus "all"; unknown statuses only count toward "all" """
    counts = {ALL: 0}
    counts.update({status.value: 0 for status in OrderStatus})

    for order in orders:
        counts[ALL] += 1
        status = OrderStatus.parse(order.status)
        if status is not None:
            counts[status.value] += 1

    return counts


class OrderListViewModel:
    """
    Order history for one user, or every order for an admin.

    Holds the fetched records and the active filter; the visible subset and
    the counts are derived on each access.
    """

    def __init__(
        self,
        client: OrderClient,
        auth: AuthContext,
        notifier: Notifier,
        admin: bool = False,
    ):
        self.client = client
        self.auth = auth
        self.notifier = notifier
        self.admin = admin
        self.orders: list[OrderRecord] = []
        self.filter: str = ALL
        self.loading = False

    async def load(self) -> bool:
        """Fetch and normalize orders; returns False when the fetch failed"""
        if not self.admin and not self.auth.is_authenticated:
            self.orders = []
            return False

        self.loading = True
        try:
            if self.admin:
                result = await self.client.list_all_orders()
            else:
                result = await self.client.list_user_orders(self.auth.user_id)
        finally:
            self.loading = False

        if not result.success:
            self.notifier.error(result.error)
            self.orders = []
            return False

        self.orders = normalize_orders(result.data)
        logger.debug(f"Loaded {len(self.orders)} orders")
        return True

    def set_filter(self, status_or_all: str) -> None:
        self.filter = status_or_all

    @property
    def visible(self) -> list[OrderRecord]:
        return filter_orders(self.orders, self.filter)

    @property
    def counts(self) -> dict[str, int]:
        return count_by_status(self.orders)

    async def update_status(self, order_id, status: Union[OrderStatus, str]) -> Result:
        """Admin status change; the local record follows only on success"""
        result = await self.client.update_order_status(order_id, status)

        if not result.success:
            self.notifier.error(result.error or "Failed to update order status")
            return result

        new_status = OrderStatus.parse(status)
        for index, order in enumerate(self.orders):
            if str(order.id) == str(order_id):
                self.orders[index] = order.model_copy(update={"status": new_status.value})

        self.notifier.success("Order status updated successfully")
        return result
