# Storefront services

from .checkout_wizard import CheckoutStep, CheckoutWizard
from .normalizer import normalize_order, normalize_orders
from .order_client import OrderClient
from .order_list import OrderListViewModel, count_by_status, filter_orders
from .payload_builder import build_order_request
from .profile_client import ProfileClient

__all__ = [
    "CheckoutStep",
    "CheckoutWizard",
    "normalize_order",
    "normalize_orders",
    "OrderClient",
    "OrderListViewModel",
    "count_by_status",
    "filter_orders",
    "build_order_request",
    "ProfileClient",
]
