# Storefront Routes

from .checkout import router as checkout_router
from .orders import router as orders_router
from .pages import router as pages_router

__all__ = ["checkout_router", "orders_router", "pages_router"]
