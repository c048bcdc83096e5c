import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import DuplicateError, ValidationError
from ..core.security import hash_password, verify_password
from ..orders.models import Order
from ..profile.crud import build_profile
from ..profile.models import Profile
from .models import User

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_latest_user(db: Session) -> Optional[User]:
    return db.query(User).order_by(User.created_at.desc()).first()


def is_duplicate_email(error: IntegrityError) -> bool:
    """SQLite reports "UNIQUE constraint failed: users.email", MySQL "Duplicate entry ... for key 'users.email'"."""
    message = str(error.orig).lower()
    return "email" in message and ("unique" in message or "duplicate" in message)


def create_user_with_profile(db: Session, email: str, password: str, profile_fields: Optional[dict] = None) -> User:
    """
    Create a user and its profile in a single transaction.

    Args:
        db: Database session
        email: Unique login email
        password: Plaintext password, hashed before storage
        profile_fields: Optional profile values keyed by canonical field name

    Returns:
        User: The committed user, with ``profile`` loaded

    Raises:
        DuplicateError: The email is already registered; nothing is written
    """
    db_user = User(email=email, password_hash=hash_password(password))
    db.add(db_user)
    try:
        # Flush so the generated user id is available to the profile row
        db.flush()
        db.add(build_profile(db_user.id, email, profile_fields))
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not is_duplicate_email(e):
            raise
        logger.info(f"Signup rejected for {email}: {str(e.orig)}")
        raise DuplicateError("Email already exists") from e

    db.refresh(db_user)
    logger.info(f"Created user {db_user.id}")
    return db_user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Look up a user by email and check the password.

    Raises:
        ValidationError: Unknown email or wrong password
    """
    user = get_user_by_email(db, email)
    if user is None:
        raise ValidationError("User not found")
    if not verify_password(password, user.password_hash):
        raise ValidationError("Invalid password")
    return user


def delete_user_by_email(db: Session, email: str) -> int:
    """
    Remove a user with its profile and orders.

    Returns:
        int: Number of users deleted (0 or 1)
    """
    db_user = get_user_by_email(db, email)
    if db_user is None:
        return 0

    try:
        db.query(Order).filter(Order.user_id == db_user.id).delete(synchronize_session=False)
        db.query(Profile).filter(Profile.user_id == db_user.id).delete(synchronize_session=False)
        db.delete(db_user)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return 1
