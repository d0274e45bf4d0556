"""Checkout models: shipping form and order-creation payload"""

import json
from typing import Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

DEFAULT_PAYMENT_METHOD = "STRIPE"
DEFAULT_COLOR = "Default"
DEFAULT_SIZE = "M"

# Every shipping field except order notes
REQUIRED_SHIPPING_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "address",
    "city",
    "state",
    "zip_code",
    "country",
)


class ShippingForm(BaseModel):
    """Shipping details entered on the first checkout step"""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = "United States"
    order_notes: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        validate_assignment = True

    def missing_fields(self) -> list[str]:
        """Required fields that are still empty"""
        return [
            name for name in REQUIRED_SHIPPING_FIELDS
            if not getattr(self, name).strip()
        ]

    def format_address(self) -> str:
        """Single-line address in the order the order API stores it"""
        return (
            f"{self.first_name} {self.last_name}, {self.address}, "
            f"{self.city}, {self.state} {self.zip_code}, {self.country}"
        )


class WireItem(BaseModel):
    """Item shape sent to the order API"""
    product_id: Union[int, str]
    product_name: str
    quantity: int
    price: float
    color: str = DEFAULT_COLOR
    size: str = DEFAULT_SIZE

    def to_wire(self) -> dict:
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "quantity": self.quantity,
            "price": self.price,
            "color": self.color,
            "size": self.size,
        }


class OrderCreateRequest(BaseModel):
    """Order-creation payload, built once per submit"""
    user_id: Union[int, str]
    total_amount: float = Field(ge=0)
    shipping_address: str
    payment_method: str = DEFAULT_PAYMENT_METHOD
    items: list[WireItem]

    class Config:
        frozen = True

    def to_form(self) -> dict[str, str]:
        """Form-encoded body for POST /orders"""
        return {
            "userId": str(self.user_id),
            "totalAmount": str(self.total_amount),
            "shippingAddress": self.shipping_address,
            "paymentMethod": self.payment_method,
            "items": json.dumps([item.to_wire() for item in self.items]),
        }
