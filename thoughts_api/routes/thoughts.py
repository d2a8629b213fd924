"""
Thoughts API — Thought Route Handlers
=======================================

What:  CRUD endpoints for thoughts plus the like action.
How:   Each handler pulls path/query/body values, resolves the caller through
       the auth dependencies, and delegates to ThoughtService.

Authentication:
    - GET endpoints and /like are public
    - POST /thoughts accepts an optional token (the caller becomes the owner)
    - PATCH and DELETE require a token and ownership
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from thoughts_api.database import get_db_session
from thoughts_api.dependencies import get_current_user, get_optional_user
from thoughts_api.models.user import User
from thoughts_api.schemas.common import ErrorResponse
from thoughts_api.schemas.thought import (
    ThoughtCreate,
    ThoughtListResponse,
    ThoughtResponse,
    ThoughtUpdate,
)
from thoughts_api.services.thought_service import DEFAULT_LIMIT, DEFAULT_PAGE, thought_service

router = APIRouter(prefix="/thoughts", tags=["Thoughts"])

_NOT_FOUND = {"description": "Thought not found", "model": ErrorResponse}
_BAD_REQUEST = {"description": "Invalid id or message", "model": ErrorResponse}
_UNAUTHORIZED = {"description": "Missing or unknown access token", "model": ErrorResponse}
_FORBIDDEN = {"description": "Caller does not own this thought", "model": ErrorResponse}


@router.get(
    "",
    response_model=ThoughtListResponse,
    responses={400: {"description": "Invalid page or limit", "model": ErrorResponse}},
    summary="List thoughts, newest first",
)
async def list_thoughts(
    response: Response,
    page: int = Query(default=DEFAULT_PAGE, ge=1, description="1-based page number"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, description="Thoughts per page"),
    db: AsyncSession = Depends(get_db_session),
) -> ThoughtListResponse:
    result = await thought_service.list_thoughts(db=db, page=page, limit=limit)
    response.headers["X-Total-Count"] = str(result.total_thoughts)
    return result


@router.get(
    "/{thought_id}",
    response_model=ThoughtResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
    summary="Get a single thought",
)
async def get_thought(
    thought_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> ThoughtResponse:
    return await thought_service.get_thought(db=db, thought_id=thought_id)


@router.post(
    "",
    status_code=201,
    response_model=ThoughtResponse,
    responses={400: _BAD_REQUEST},
    summary="Post a thought",
    description=(
        "Creates a thought of 5-140 characters. When the request carries a valid "
        "Authorization token the caller is recorded as the owner; otherwise the "
        "thought is anonymous and can never be edited or deleted."
    ),
)
async def create_thought(
    body: ThoughtCreate,
    user: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db_session),
) -> ThoughtResponse:
    return await thought_service.create_thought(db=db, message=body.message, user=user)


@router.post(
    "/{thought_id}/like",
    response_model=ThoughtResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
    summary="Like a thought",
)
async def like_thought(
    thought_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> ThoughtResponse:
    return await thought_service.like_thought(db=db, thought_id=thought_id)


@router.patch(
    "/{thought_id}",
    response_model=ThoughtResponse,
    responses={400: _BAD_REQUEST, 401: _UNAUTHORIZED, 403: _FORBIDDEN, 404: _NOT_FOUND},
    summary="Edit your thought",
)
async def update_thought(
    thought_id: str,
    body: ThoughtUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ThoughtResponse:
    return await thought_service.update_thought(
        db=db, thought_id=thought_id, message=body.message, user=user
    )


@router.delete(
    "/{thought_id}",
    status_code=204,
    response_class=Response,
    responses={400: _BAD_REQUEST, 401: _UNAUTHORIZED, 403: _FORBIDDEN, 404: _NOT_FOUND},
    summary="Delete your thought",
)
async def delete_thought(
    thought_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await thought_service.delete_thought(db=db, thought_id=thought_id, user=user)
    return Response(status_code=204)
