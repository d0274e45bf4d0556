"""Cart models for the checkout flow"""

from pydantic import BaseModel, Field
from typing import Optional, Union


class CartItem(BaseModel):
    """Line item held by the cart collaborator"""
    id: Union[int, str]
    name: str
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)
    color: Optional[str] = "Default"
    size: Optional[str] = "M"
    image: Optional[str] = None


class CartTotals(BaseModel):
    """Totals computed by the cart collaborator"""
    subtotal: float = 0.0
    shipping: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    total_items: int = 0
