# Core modules

from .config import settings
from .context import AuthContext, CartContext, Navigator, Notifier
from .errors import MalformedDataError, PreconditionError, StorefrontError, TransportError

__all__ = [
    "settings",
    "AuthContext",
    "CartContext",
    "Navigator",
    "Notifier",
    "MalformedDataError",
    "PreconditionError",
    "StorefrontError",
    "TransportError",
]
