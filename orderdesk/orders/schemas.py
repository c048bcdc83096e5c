from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class OrderCreate(BaseModel):
    product_id: str
    quantity: int
    total_price: Decimal


class OrderResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    total_price: float
    status: str
    created_at: Optional[str] = None


class OrderCreatedResponse(BaseModel):
    message: str
    orderId: str
