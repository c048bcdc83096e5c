import logging
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.database import utcnow
from ..core.exceptions import NotFoundError, PolicyError, ValidationError
from .models import Order

logger = logging.getLogger(__name__)

CANCELLATION_WINDOW = timedelta(milliseconds=60000)
TWO_PLACES = Decimal("0.01")
# DECIMAL(10, 2) holds at most eight integer digits
MAX_PRICE = Decimal("1e8")


def to_price(value) -> Decimal:
    """Coerce a client price to a two-digit fixed-point value."""
    try:
        price = Decimal(str(value)).quantize(TWO_PLACES)
    except (InvalidOperation, ValueError) as e:
        raise ValidationError("total_price must be numeric") from e
    if not price.is_finite():
        raise ValidationError("total_price must be numeric")
    if abs(price) >= MAX_PRICE:
        raise ValidationError("total_price is out of range")
    return price


def create_order(db: Session, user_id: str, product_id: str, quantity: int, total_price) -> Order:
    """
    Place a pending order for a user.

    Args:
        db: Database session
        user_id: Owner, always taken from the authenticated identity
        product_id: Product reference
        quantity: Number of units
        total_price: Anything Decimal accepts; stored with two fractional digits

    Returns:
        Order: The committed order
    """
    db_order = Order(
        user_id=user_id,
        product_id=product_id,
        quantity=quantity,
        total_price=to_price(total_price),
        status="pending",
    )
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    logger.info(f"Order {db_order.id} created for user {user_id}")
    return db_order


def get_order(db: Session, user_id: str, order_id: str) -> Optional[Order]:
    return db.query(Order).filter(Order.id == order_id, Order.user_id == user_id).first()


def list_orders(db: Session, user_id: str) -> List[Order]:
    return db.query(Order).filter(Order.user_id == user_id).order_by(Order.created_at.desc()).all()


def list_all_orders(db: Session) -> List[Order]:
    return db.query(Order).order_by(Order.created_at.desc()).all()


def cancel_order(db: Session, user_id: str, order_id: str, now: Optional[datetime] = None) -> Order:
    """
    Delete an order if its owner asks within the cancellation window.

    Exactly 60000 ms after creation is still allowed; anything later is not.

    Raises:
        NotFoundError: No order with that id belongs to the user
        PolicyError: The cancellation window has passed
    """
    order = get_order(db, user_id, order_id)
    if order is None:
        raise NotFoundError("Order not found")

    elapsed = (now or utcnow()) - order.created_at
    if elapsed > CANCELLATION_WINDOW:
        raise PolicyError("Order cannot be cancelled after 1 minute")

    db.delete(order)
    db.commit()
    logger.info(f"Order {order_id} cancelled by user {user_id}")
    return order
