from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import ensure_owner, get_current_user
from ..core.database import get_db
from ..core.security import TokenData
from . import crud
from .schemas import ProfileResponse, ProfileUpdate

router = APIRouter(prefix="/api/profiles", tags=["Profiles"])


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: str,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ensure_owner(user_id, current_user)
    return crud.get_profile(db, user_id)


@router.put("/{user_id}")
def update_profile(
    user_id: str,
    profile_update: ProfileUpdate,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Partial update: fields left out of the body keep their stored values."""
    ensure_owner(user_id, current_user)
    profile = crud.update_profile(db, user_id, profile_update.supplied())
    return {"message": "Profile updated successfully", "profile": profile}
