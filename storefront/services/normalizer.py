"""
Response Normalizer

Reshapes raw order objects from the order API into OrderRecords. The API
embeds items and shipping address as JSON text inside string fields; any
field that fails to parse falls back to an empty value so the record as a
whole always renders.
"""

import json
import logging
import math
from datetime import date, datetime
from typing import Any, Iterable, Optional

from ..core.errors import MalformedDataError
from ..models.order import OrderLine, OrderRecord, OrderStatus

logger = logging.getLogger(__name__)


def _parse_embedded(value: Any, expected: type) -> Any:
    """Decode a JSON-text field, accepting values that arrive already decoded"""
    if isinstance(value, expected):
        return value
    if not isinstance(value, str):
        raise MalformedDataError(f"expected JSON text, got {type(value).__name__}")

    try:
        parsed = json.loads(value)
    except ValueError as e:
        raise MalformedDataError(f"invalid JSON: {e}") from e

    if not isinstance(parsed, expected):
        raise MalformedDataError(
            f"expected {expected.__name__}, got {type(parsed).__name__}"
        )
    return parsed


def parse_amount(value: Any) -> float:
    """Decimal amount, 0 when absent, non-numeric or not finite"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def _parse_quantity(value: Any) -> int:
    # json.loads accepts Infinity and NaN
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _parse_date(value: Any, today: date) -> str:
    # Server timestamps look like "2024-01-15 10:22:33.0" or ISO 8601
    if isinstance(value, str) and len(value) >= 10:
        try:
            return date.fromisoformat(value[:10]).isoformat()
        except ValueError:
            pass
    return today.isoformat()


def _normalize_line(raw: dict) -> OrderLine:
    return OrderLine(
        name=str(raw.get("productName") or raw.get("name") or ""),
        quantity=_parse_quantity(raw.get("quantity")),
        price=parse_amount(raw.get("price")),
        color=_optional_str(raw.get("color")),
        size=_optional_str(raw.get("size")),
    )


def normalize_status(value: Any) -> str:
    """Lower-cased status; pending when absent, unknown values kept for display"""
    if value is None or not str(value).strip():
        return OrderStatus.PENDING.value
    return str(value).strip().lower()


def normalize_order(raw: dict[str, Any], today: Optional[date] = None) -> OrderRecord:
    """
    Normalize one raw order object.

    Args:
        raw: Order object as returned by the order API
        today: Date used when the record carries no creation timestamp
            (defaults to the current date)

    Returns:
        A well-formed OrderRecord; this never raises for bad field values
    """
    today = today or datetime.now().date()
    order_id = raw.get("id")

    try:
        raw_items = _parse_embedded(raw.get("items"), list)
    except MalformedDataError as e:
        logger.warning(f"Order {order_id}: items not parsed ({e})")
        raw_items = []

    address_value = raw.get("shippingAddress")
    try:
        shipping_address = _parse_embedded(address_value, dict)
    except MalformedDataError as e:
        logger.warning(f"Order {order_id}: shipping address not parsed ({e})")
        shipping_address = {}

    return OrderRecord(
        id=order_id,
        order_number=str(raw.get("orderNumber") or ""),
        date=_parse_date(raw.get("createdAt") or raw.get("date"), today),
        status=normalize_status(raw.get("status")),
        total=parse_amount(raw.get("totalAmount", raw.get("total"))),
        items=[_normalize_line(item) for item in raw_items if isinstance(item, dict)],
        shipping_address=shipping_address,
        shipping_address_text=address_value if isinstance(address_value, str) else "",
        payment_method=str(raw.get("paymentMethod") or ""),
        user_id=raw.get("userId"),
        customer_name=_optional_str(raw.get("customerName")),
        customer_email=_optional_str(raw.get("customerEmail")),
    )


def normalize_orders(
    raws: Iterable[Any],
    today: Optional[date] = None,
) -> list[OrderRecord]:
    """Normalize a list of raw orders, skipping entries that are not objects"""
    records = []
    for raw in raws:
        if not isinstance(raw, dict):
            logger.warning(f"Skipping non-object order entry: {raw!r}")
            continue
        records.append(normalize_order(raw, today=today))
    return records
