import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.security import TokenData
from ..orders.crud import list_all_orders
from ..orders.schemas import OrderResponse
from ..profile.crud import list_profiles_with_users
from ..profile.schemas import AdminProfileResponse

router = APIRouter(prefix="/api/admin", tags=["Admin"])

logger = logging.getLogger(__name__)

# TODO: gate these behind an admin role once users carry one; any valid token is accepted today


@router.get("/profiles", response_model=List[AdminProfileResponse])
def get_all_profiles(current_user: TokenData = Depends(get_current_user), db: Session = Depends(get_db)):
    logger.info(f"User {current_user.id} listed all profiles")
    return list_profiles_with_users(db)


@router.get("/orders", response_model=List[OrderResponse])
def get_all_orders(current_user: TokenData = Depends(get_current_user), db: Session = Depends(get_db)):
    logger.info(f"User {current_user.id} listed all orders")
    return [order.to_dict() for order in list_all_orders(db)]
