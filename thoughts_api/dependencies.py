"""
Thoughts API — Authentication Dependencies
============================================

What:  FastAPI dependencies that turn the Authorization header into a User.
Why:   Protected routes declare `user: User = Depends(get_current_user)` and
       receive the caller explicitly, instead of reading it off shared
       request state.
How:   The header carries the raw access token issued at register/login.
       A leading "Bearer " scheme is accepted and stripped.

    get_current_user   → User, or 401 when the token is missing/unknown
    get_optional_user  → User or None (anonymous callers allowed)
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from thoughts_api.database import get_db_session
from thoughts_api.exceptions import AuthenticationError
from thoughts_api.models.user import User
from thoughts_api.services.user_service import user_service


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of an Authorization header value."""
    if not authorization:
        return None
    token = authorization.strip()
    scheme, _, rest = token.partition(" ")
    if scheme.lower() == "bearer" and rest:
        token = rest.strip()
    return token or None


async def get_optional_user(
    authorization: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Optional[User]:
    token = extract_token(authorization)
    if token is None:
        return None
    return await user_service.get_by_access_token(db, token)


async def get_current_user(
    user: Optional[User] = Depends(get_optional_user),
) -> User:
    if user is None:
        raise AuthenticationError("Please log in to access this resource")
    return user
