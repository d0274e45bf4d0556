"""Order history models"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: Any) -> Optional["OrderStatus"]:
        """Case-insensitive lookup; None for anything outside the enum"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class OrderLine(BaseModel):
    """Item in a normalized order"""
    name: str = ""
    quantity: int = 0
    price: float = 0.0
    color: Optional[str] = None
    size: Optional[str] = None


class OrderRecord(BaseModel):
    """Client view of an order returned by the order API"""
    id: Any = None
    order_number: str = ""
    date: str
    status: str = OrderStatus.PENDING.value
    total: float = 0.0
    items: list[OrderLine] = []
    shipping_address: dict[str, Any] = {}
    shipping_address_text: str = ""
    payment_method: str = ""
    # Present on admin listings
    user_id: Any = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None

    @property
    def known_status(self) -> Optional[OrderStatus]:
        return OrderStatus.parse(self.status)
