"""
Order API Client Base

Shared HTTP plumbing for the remote order API. Requests are form-encoded,
responses are JSON objects carrying a boolean ``success`` field. Every
expected failure is turned into a ``Failure`` result at this boundary.
"""

import logging
from typing import Any, Optional

import httpx

from ..core.errors import TransportError
from ..models.result import Failure, Result, Success

logger = logging.getLogger(__name__)


def server_message(body: Any) -> Optional[str]:
    """The ``error`` (or ``message``) text of a response body, if it is text"""
    if not isinstance(body, dict):
        return None
    for key in ("error", "message"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class ApiClient:
    """Base client for the order API"""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL of the order API (servlet context path)
            timeout: Transport timeout in seconds, None for no timeout
            http_client: Pre-built client, e.g. one with a mock transport
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        form: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """Make an HTTP request and return the decoded JSON object"""
        url = f"{self.base_url}{path}"
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                headers=request_headers,
                data=form,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} unreachable: {e}") from e
        finally:
            # One client serves every shopper; server sessions must not leak between them
            self._http_client.cookies.clear()

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed JSON from {method} {url} ({response.status_code})",
                status_code=response.status_code,
            ) from e

        if not response.is_success:
            raise TransportError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                server_message=server_message(body),
            )

        if not isinstance(body, dict):
            raise TransportError(
                f"Unexpected response format from {method} {url}",
                status_code=response.status_code,
            )

        return body

    async def _call(
        self,
        method: str,
        path: str,
        form: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
        default_error: str = "Request failed",
    ) -> Result:
        """Run a request and wrap the outcome in a Success or Failure"""
        try:
            body = await self._request(method, path, form=form, headers=headers)
        except TransportError as e:
            logger.error(f"Request failed: {e}")
            return Failure(error=e.server_message or default_error)

        if not body.get("success"):
            error = server_message(body) or default_error
            logger.error(f"{method} {path} rejected: {error}")
            return Failure(error=error)

        return Success(data=body.get("data"))
