"""
Thoughts API — Registration & Login Routes
============================================

Both endpoints return `{email, id, accessToken}`. Clients send the token
back in the Authorization header on PATCH/DELETE /thoughts/{id} (and
optionally on POST /thoughts).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from thoughts_api.database import get_db_session
from thoughts_api.schemas.common import ErrorResponse
from thoughts_api.schemas.user import AuthResponse, Credentials
from thoughts_api.services.user_service import user_service

router = APIRouter(tags=["Auth"])


@router.post(
    "/register",
    status_code=201,
    response_model=AuthResponse,
    responses={400: {"description": "Missing fields or email already registered", "model": ErrorResponse}},
    summary="Create an account",
)
async def register(
    body: Credentials,
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    return await user_service.register(db=db, email=body.email, password=body.password)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        400: {"description": "Missing fields", "model": ErrorResponse},
        401: {"description": "Invalid email or password", "model": ErrorResponse},
    },
    summary="Exchange email and password for the access token",
)
async def login(
    body: Credentials,
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    return await user_service.login(db=db, email=body.email, password=body.password)
