"""
Thoughts API — User Service
=============================

What:  Registration, login, and access-token lookup.
Why:   One place owns credential rules (required fields, password length,
       duplicate emails) and the bcrypt calls.
Who:   Called by the /register and /login routes and by the authentication
       dependencies in `thoughts_api.dependencies`.

Security Notes:
    - Passwords are hashed with bcrypt in a worker thread (bcrypt is CPU-bound
      and would otherwise stall the event loop for every other request).
    - Login answers the same 401 for "unknown email" and "wrong password", so
      the endpoint can't be used to probe which emails are registered.
    - Neither passwords nor tokens are ever logged.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from thoughts_api.exceptions import AuthenticationError, DatabaseError, ValidationError
from thoughts_api.models.user import User
from thoughts_api.schemas.user import AuthResponse
from thoughts_api.services.security import (
    BCRYPT_MAX_PASSWORD_BYTES,
    generate_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """Stateless credential workflows; each call receives the request session."""

    async def register(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResponse:
        """
        Create an account and hand back its access token.

        Raises:
            ValidationError: Missing fields, short password, bad email format,
                             or an email that is already registered
            DatabaseError:   Unexpected database failure
        """
        if not email or not password:
            raise ValidationError("Email and password are required")
        if len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                field="password",
            )
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
                field="password",
            )

        email = normalize_email(email)
        if await self._find_by_email(db, email) is not None:
            raise ValidationError("Email already exists", field="email")

        hashed = await run_in_threadpool(hash_password, password)
        user = User(email=email, password=hashed, access_token=generate_access_token())
        try:
            db.add(user)
            await db.flush()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            raise ValidationError("Email already exists", field="email")
        except SQLAlchemyError as e:
            logger.error("Database error registering user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create account",
                context={"error_type": type(e).__name__},
            )

        logger.info("Registered user %s", user.id)
        return AuthResponse(email=user.email, id=user.id, access_token=user.access_token)

    async def login(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResponse:
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self._find_by_email(db, normalize_email(email))
        if user is None or not await run_in_threadpool(verify_password, password, user.password):
            logger.info("Failed login attempt")
            raise AuthenticationError("Invalid email or password")

        return AuthResponse(email=user.email, id=user.id, access_token=user.access_token)

    async def get_by_access_token(self, db: AsyncSession, token: str) -> Optional[User]:
        """Resolve a bearer token to its user, or None."""
        if not token:
            return None
        try:
            result = await db.execute(select(User).where(User.access_token == token))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error resolving access token: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})

    async def _find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        try:
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up user by email: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
