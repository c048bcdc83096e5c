import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel

from . import config

logger = logging.getLogger(__name__)


class TokenData(BaseModel):
    id: str
    email: str


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt work factor, defaults to BCRYPT_ROUNDS

    Returns:
        str: Salted hash, safe to store
    """
    salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Returns False on mismatch. A malformed hash raises ValueError.
    """
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed JWT binding the user id and email.

    Args:
        data: Must contain "id" and "email"
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_HOURS

    Returns:
        str: Encoded token
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=config.ACCESS_TOKEN_EXPIRE_HOURS)
    to_encode = {
        "id": str(data["id"]),
        "email": data["email"],
        "sub": str(data["id"]),
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenData]:
    """Return the identity embedded in a valid token, None otherwise."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected token: {str(e)}")
        return None

    user_id = payload.get("id")
    email = payload.get("email")
    if not user_id or not email:
        return None
    return TokenData(id=user_id, email=email)
