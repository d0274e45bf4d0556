"""Pytest fixtures for storefront tests."""

import asyncio
import json
from typing import Any, Optional

import httpx
import pytest

from storefront.core.context import AuthContext, CartContext, Navigator, Notifier
from storefront.services.checkout_wizard import CheckoutWizard
from storefront.services.order_client import OrderClient
from storefront.services.profile_client import ProfileClient

BASE_URL = "http://order-api.test/WebViva"
BASE_PATH = "/WebViva"


class FakeOrderApi:
    """In-process stand-in for the remote order API, served through httpx.MockTransport"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], dict[str, Any]] = {}

    def on(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status: int = 200,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self._routes[(method, path)] = {
            "json": json_body,
            "status": status,
            "text": text,
            "error": error,
            "delay": delay,
            "headers": headers,
        }

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(BASE_PATH):]
        route = self._routes.get((request.method, path))

        if route is None:
            return httpx.Response(404, json={"success": False, "error": "Not found"})
        if route["delay"]:
            await asyncio.sleep(route["delay"])
        if route["error"] is not None:
            raise route["error"]
        if route["text"] is not None:
            return httpx.Response(route["status"], text=route["text"], headers=route["headers"])
        return httpx.Response(route["status"], json=route["json"], headers=route["headers"])

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path == BASE_PATH + path
        ]


def form_body(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body"""
    return dict(httpx.QueryParams(request.content.decode()))


def form_items(request: httpx.Request) -> list[dict]:
    return json.loads(form_body(request)["items"])


@pytest.fixture
def order_api():
    return FakeOrderApi()


@pytest.fixture
def http_client(order_api):
    return httpx.AsyncClient(transport=httpx.MockTransport(order_api.handler))


@pytest.fixture
def order_client(http_client):
    return OrderClient(base_url=BASE_URL, http_client=http_client)


@pytest.fixture
def profile_client(http_client):
    return ProfileClient(base_url=BASE_URL, http_client=http_client)


@pytest.fixture
def shipping_data():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "address": "12 Analytical Way",
        "city": "London",
        "state": "LDN",
        "zipCode": "N1 9GU",
        "country": "United Kingdom",
    }


@pytest.fixture
def cart():
    return CartContext([{"id": 1, "name": "Widget", "price": 10, "quantity": 2}])


@pytest.fixture
def wizard(order_client, cart):
    return CheckoutWizard(
        client=order_client,
        auth=AuthContext(user_id=7),
        cart=cart,
        notifier=Notifier(),
        navigator=Navigator(),
    )
