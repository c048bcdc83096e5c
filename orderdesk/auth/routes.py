import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.exceptions import NotFoundError
from ..core.security import TokenData, create_access_token
from ..user.crud import authenticate, create_user_with_profile, get_user
from ..user.models import User
from .schemas import AuthResponse, Login, MeResponse, Signup

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

logger = logging.getLogger(__name__)


def _session_payload(user: User) -> dict:
    identity = {"id": user.id, "email": user.email}
    token = create_access_token(identity)
    return {
        "user": identity,
        "session": {"access_token": token, "token_type": "bearer", "user": identity},
    }


@router.post("/signup", response_model=AuthResponse)
def signup(signup_data: Signup, db: Session = Depends(get_db)):
    logger.info(f"Signup attempt: {signup_data.email}")
    new_user = create_user_with_profile(db, signup_data.email, signup_data.password, signup_data.supplied())
    return _session_payload(new_user)


@router.post("/login", response_model=AuthResponse)
def login(login_data: Login, db: Session = Depends(get_db)):
    user = authenticate(db, login_data.email, login_data.password)
    return _session_payload(user)


@router.get("/me", response_model=MeResponse)
def get_current_user_info(current_user: TokenData = Depends(get_current_user), db: Session = Depends(get_db)):
    user = get_user(db, current_user.id)
    if user is None:
        raise NotFoundError("User not found")
    return {"user": {"id": user.id, "email": user.email}}
