from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from .exceptions import AuthenticationError, AuthorizationError, InvalidTokenError
from .security import TokenData, decode_access_token

# auto_error is off so a missing token maps to 401 and a bad one to 403
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


async def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> TokenData:
    """
    Resolve the caller's identity from the Authorization bearer token.

    Raises:
        AuthenticationError: No token was sent (401)
        InvalidTokenError: The token is expired or tampered (403)
    """
    if not token:
        raise AuthenticationError()

    identity = decode_access_token(token)
    if identity is None:
        raise InvalidTokenError()
    return identity


def ensure_owner(user_id: str, current_user: TokenData):
    """The authenticated identity must match the user addressed in the path."""
    if user_id != current_user.id:
        raise AuthorizationError("Forbidden")
