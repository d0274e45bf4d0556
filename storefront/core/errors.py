"""Storefront error taxonomy"""

from typing import Optional


class StorefrontError(Exception):
    """Base exception for storefront errors"""
    pass


class PreconditionError(StorefrontError):
    """Required context is missing (no authenticated user, empty cart)"""
    pass


class TransportError(StorefrontError):
    """Network, HTTP or response-parsing failure on an API call"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message


class MalformedDataError(StorefrontError):
    """Embedded JSON in a server record could not be parsed"""
    pass
