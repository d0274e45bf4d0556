# Storefront Models

from .cart import CartItem, CartTotals
from .checkout import (
    DEFAULT_PAYMENT_METHOD,
    OrderCreateRequest,
    ShippingForm,
    WireItem,
)
from .order import OrderLine, OrderRecord, OrderStatus
from .result import Failure, Result, Success

__all__ = [
    "CartItem",
    "CartTotals",
    "DEFAULT_PAYMENT_METHOD",
    "OrderCreateRequest",
    "ShippingForm",
    "WireItem",
    "OrderLine",
    "OrderRecord",
    "OrderStatus",
    "Failure",
    "Result",
    "Success",
]
