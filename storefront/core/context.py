"""
Collaborator contexts for the checkout flow

Explicit stand-ins for the auth, cart, toast and navigation collaborators.
Each is passed by reference to the components that need it; only the cart
context mutates cart contents.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional, Union

from ..models.cart import CartItem, CartTotals

logger = logging.getLogger(__name__)


@dataclass
class AuthContext:
    """Authenticated-user context"""
    user_id: Optional[Union[int, str]] = None
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None and str(self.user_id) != ""


class CartContext:
    """Session cart; the only owner allowed to change its items"""

    TAX_RATE = 0.08  # 8% tax
    FREE_SHIPPING_THRESHOLD = 50.0
    SHIPPING_FEE = 10.0

    def __init__(self, items: Optional[Iterable[Union[CartItem, dict]]] = None):
        self._items: list[CartItem] = [
            item if isinstance(item, CartItem) else CartItem.model_validate(item)
            for item in (items or [])
        ]

    @property
    def items(self) -> list[CartItem]:
        """Snapshot of the cart contents"""
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def add_item(self, item: Union[CartItem, dict]) -> None:
        """Add an item, merging quantity with a matching id/color/size line"""
        if not isinstance(item, CartItem):
            item = CartItem.model_validate(item)

        existing = next(
            (
                line for line in self._items
                if (line.id, line.color, line.size) == (item.id, item.color, item.size)
            ),
            None,
        )
        if existing:
            existing.quantity += item.quantity
        else:
            self._items.append(item)

    def clear(self) -> None:
        """Clear all items from cart"""
        self._items = []
        logger.debug("Cart cleared")

    def totals(self) -> CartTotals:
        """Subtotal, shipping, tax and total for the current items"""
        subtotal = sum(item.price * item.quantity for item in self._items)
        shipping = 0.0 if subtotal >= self.FREE_SHIPPING_THRESHOLD else self.SHIPPING_FEE
        tax = subtotal * self.TAX_RATE

        return CartTotals(
            subtotal=round(subtotal, 2),
            shipping=round(shipping, 2),
            tax=round(tax, 2),
            total=round(subtotal + shipping + tax, 2),
            total_items=sum(item.quantity for item in self._items),
        )


@dataclass
class Notification:
    """Transient toast message"""
    level: str
    message: str
    created_at: datetime = field(default_factory=datetime.utcnow)


class Notifier:
    """Toast sink; keeps messages until drained by the view"""

    def __init__(self):
        self.notifications: list[Notification] = []

    def success(self, message: str) -> None:
        self._push("success", message)

    def error(self, message: str) -> None:
        self._push("error", message)

    def _push(self, level: str, message: str) -> None:
        self.notifications.append(Notification(level=level, message=message))
        logger.debug(f"Toast [{level}]: {message}")

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def drain(self) -> list[Notification]:
        """Return pending notifications and forget them"""
        pending, self.notifications = self.notifications, []
        return pending


@dataclass
class Route:
    """Navigation target with optional state payload"""
    path: str
    state: Optional[dict[str, Any]] = None


class Navigator:
    """Navigation sink; records route changes"""

    def __init__(self):
        self.history: list[Route] = []

    def go(self, path: str, state: Optional[dict[str, Any]] = None) -> None:
        self.history.append(Route(path=path, state=state))
        logger.info(f"Navigating to {path}")

    @property
    def current(self) -> Optional[Route]:
        return self.history[-1] if self.history else None
