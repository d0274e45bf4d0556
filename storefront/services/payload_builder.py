"""Order payload builder: cart + shipping form -> order-creation request"""

from typing import Optional, Sequence, Union

from ..core.errors import PreconditionError
from ..models.cart import CartItem
from ..models.checkout import (
    DEFAULT_COLOR,
    DEFAULT_PAYMENT_METHOD,
    DEFAULT_SIZE,
    OrderCreateRequest,
    ShippingForm,
    WireItem,
)


def to_wire_item(item: Union[CartItem, dict]) -> WireItem:
    """Map a cart line to the order API item shape"""
    if not isinstance(item, CartItem):
        item = CartItem.model_validate(item)

    return WireItem(
        product_id=item.id,
        product_name=item.name,
        quantity=item.quantity,
        price=item.price,
        color=item.color or DEFAULT_COLOR,
        size=item.size or DEFAULT_SIZE,
    )


def build_order_request(
    cart_items: Sequence[Union[CartItem, dict]],
    shipping_form: Union[ShippingForm, dict],
    user_id: Optional[Union[int, str]],
    total: float,
    payment_method: Optional[str] = None,
) -> OrderCreateRequest:
    """
    Build the order-creation request for a checkout submit.

    The total is taken as computed by the cart (items, shipping and tax);
    it is not recomputed here.

    Raises:
        PreconditionError: if there is no user id
    """
    if user_id is None or str(user_id) == "":
        raise PreconditionError("An authenticated user is required to place an order")

    if not isinstance(shipping_form, ShippingForm):
        shipping_form = ShippingForm.model_validate(shipping_form)

    return OrderCreateRequest(
        user_id=user_id,
        total_amount=total,
        shipping_address=shipping_form.format_address(),
        payment_method=payment_method or DEFAULT_PAYMENT_METHOD,
        items=[to_wire_item(item) for item in cart_items],
    )
