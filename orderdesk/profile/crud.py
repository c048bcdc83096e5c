import logging
import secrets
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundError
from ..user.models import User
from .models import Profile
from .schemas import PROFILE_FIELDS, is_blank

logger = logging.getLogger(__name__)

REFERRAL_PREFIX = "REF-"


def generate_referral_id() -> str:
    # Not checked for uniqueness
    return REFERRAL_PREFIX + secrets.token_hex(4).upper()


def _profile_to_dict(profile: Profile) -> dict:
    return {field: getattr(profile, field) for field in ("id", "user_id", *PROFILE_FIELDS, "referral_id")}


def build_profile(user_id: str, email: str, fields: Optional[dict] = None) -> Profile:
    """
    Build the profile row created alongside a new user.

    Args:
        user_id: Owning user's id
        email: Owning user's email, its local part is the default full_name
        fields: Optional profile fields; anything omitted or blank is stored as null

    Returns:
        Profile: Unsaved profile, the caller adds it inside its own transaction
    """
    fields = fields or {}
    values = {field: None if is_blank(fields.get(field)) else fields.get(field) for field in PROFILE_FIELDS}
    if not values["full_name"]:
        values["full_name"] = email.split("@")[0]

    return Profile(user_id=user_id, referral_id=generate_referral_id(), **values)


def get_profile_row(db: Session, user_id: str) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def get_profile(db: Session, user_id: str) -> dict:
    """
    Fetch a user's profile together with the user's creation timestamp.

    Raises:
        NotFoundError: The user has no profile
    """
    row = (
        db.query(Profile, User.created_at)
        .join(User, Profile.user_id == User.id)
        .filter(Profile.user_id == user_id)
        .first()
    )
    if row is None:
        raise NotFoundError("Profile not found")

    profile, created_at = row
    data = _profile_to_dict(profile)
    data["created_at"] = created_at.isoformat() if created_at else None
    return data


def update_profile(db: Session, user_id: str, fields: dict) -> dict:
    """
    Merge the supplied fields into a user's profile.

    Only keys present with a non-blank value are written; every other column
    keeps its stored value.

    Raises:
        NotFoundError: The user has no profile
    """
    profile = get_profile_row(db, user_id)
    if profile is None:
        raise NotFoundError("Profile not found")

    changes = {k: v for k, v in fields.items() if k in PROFILE_FIELDS and not is_blank(v)}
    for field, value in changes.items():
        setattr(profile, field, value)

    db.commit()
    db.refresh(profile)
    logger.info(f"Updated profile for user {user_id}: {sorted(changes)}")
    return _profile_to_dict(profile)


def list_profiles_with_users(db: Session) -> List[dict]:
    """All profiles with the owner's email and join date, newest user first."""
    rows = (
        db.query(Profile, User.email, User.created_at)
        .join(User, Profile.user_id == User.id)
        .order_by(User.created_at.desc())
        .all()
    )
    profiles = []
    for profile, email, joined_at in rows:
        data = _profile_to_dict(profile)
        data["email"] = email
        data["joined_at"] = joined_at.isoformat() if joined_at else None
        profiles.append(data)
    return profiles
