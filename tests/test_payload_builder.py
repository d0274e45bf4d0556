"""Tests for the order payload builder."""

import json

import pytest

from storefront.core.errors import PreconditionError
from storefront.models.cart import CartItem
from storefront.models.checkout import ShippingForm
from storefront.services.payload_builder import build_order_request


class TestBuildOrderRequest:
    def test_single_item_with_defaults(self, shipping_data):
        request = build_order_request(
            [{"id": 1, "name": "Widget", "price": 10, "quantity": 2}],
            shipping_data,
            user_id=7,
            total=31.6,
        )

        assert [item.to_wire() for item in request.items] == [
            {
                "productId": 1,
                "productName": "Widget",
                "quantity": 2,
                "price": 10,
                "color": "Default",
                "size": "M",
            }
        ]
        assert request.user_id == 7
        assert request.total_amount == 31.6
        assert request.payment_method == "STRIPE"

    def test_shipping_address_fixed_order(self, shipping_data):
        request = build_order_request(
            [{"id": 1, "name": "Widget", "price": 10, "quantity": 1}],
            shipping_data,
            user_id=7,
            total=10,
        )
        assert request.shipping_address == (
            "Ada Lovelace, 12 Analytical Way, London, LDN N1 9GU, United Kingdom"
        )

    def test_items_keep_order_quantity_and_price(self, shipping_data):
        cart_items = [
            CartItem(id=3, name="Hoodie", price=89.99, quantity=1, color="Black", size="L"),
            CartItem(id=1, name="Shirt", price=29.99, quantity=3, color="", size=None),
            CartItem(id="sku-9", name="Socks", price=0, quantity=5),
        ]
        request = build_order_request(cart_items, shipping_data, user_id="u-1", total=200)

        assert len(request.items) == len(cart_items)
        for wire, source in zip(request.items, cart_items):
            assert wire.product_id == source.id
            assert wire.quantity == source.quantity
            assert wire.price == source.price
        assert (request.items[0].color, request.items[0].size) == ("Black", "L")
        assert (request.items[1].color, request.items[1].size) == ("Default", "M")

    def test_payment_method_override(self, shipping_data):
        request = build_order_request(
            [{"id": 1, "name": "Widget", "price": 10, "quantity": 1}],
            ShippingForm.model_validate(shipping_data),
            user_id=7,
            total=10,
            payment_method="COD",
        )
        assert request.payment_method == "COD"

    @pytest.mark.parametrize("user_id", [None, ""])
    def test_missing_user_is_precondition_error(self, shipping_data, user_id):
        with pytest.raises(PreconditionError):
            build_order_request(
                [{"id": 1, "name": "Widget", "price": 10, "quantity": 1}],
                shipping_data,
                user_id=user_id,
                total=10,
            )

    def test_total_is_not_recomputed(self, shipping_data):
        request = build_order_request(
            [{"id": 1, "name": "Widget", "price": 10, "quantity": 2}],
            shipping_data,
            user_id=7,
            total=31.6,
        )
        assert request.total_amount == 31.6

    def test_form_body(self, shipping_data):
        request = build_order_request(
            [{"id": 1, "name": "Widget", "price": 10, "quantity": 2}],
            shipping_data,
            user_id=7,
            total=31.6,
        )
        form = request.to_form()

        assert form["userId"] == "7"
        assert form["totalAmount"] == "31.6"
        assert form["paymentMethod"] == "STRIPE"
        assert json.loads(form["items"])[0]["productName"] == "Widget"


class TestShippingForm:
    def test_accepts_camel_and_snake_case(self):
        form = ShippingForm(first_name="Ada", zipCode="N1")
        assert form.first_name == "Ada"
        assert form.zip_code == "N1"

    def test_missing_fields_excludes_notes(self):
        form = ShippingForm()
        missing = form.missing_fields()
        assert "order_notes" not in missing
        assert "country" not in missing  # defaulted
        assert "first_name" in missing

    def test_complete_form_has_no_missing_fields(self, shipping_data):
        assert ShippingForm.model_validate(shipping_data).missing_fields() == []

    def test_whitespace_counts_as_missing(self, shipping_data):
        form = ShippingForm.model_validate({**shipping_data, "city": "   "})
        assert form.missing_fields() == ["city"]
