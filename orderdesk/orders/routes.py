from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.security import TokenData
from . import crud
from .schemas import OrderCreate, OrderCreatedResponse, OrderResponse

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post("", response_model=OrderCreatedResponse)
def create_order(
    order: OrderCreate,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    db_order = crud.create_order(db, current_user.id, order.product_id, order.quantity, order.total_price)
    return {"message": "Order created successfully", "orderId": db_order.id}


@router.get("", response_model=List[OrderResponse])
def get_user_orders(current_user: TokenData = Depends(get_current_user), db: Session = Depends(get_db)):
    return [order.to_dict() for order in crud.list_orders(db, current_user.id)]


@router.delete("/{order_id}")
def cancel_order(
    order_id: str,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    crud.cancel_order(db, current_user.id, order_id)
    return {"message": "Order cancelled successfully", "orderId": order_id}
