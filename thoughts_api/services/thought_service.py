"""
Thoughts API — Thought Service
================================

What:  Business logic for listing, reading, posting, liking, editing and
       deleting thoughts.
Why:   Keeps pagination math and ownership checks out of the route handlers.
How:   Stateless class; every method receives the request's AsyncSession.
Who:   Called by the /thoughts route handlers.

Error Translation:
    - Malformed id          → ValidationError("Invalid ID")          (400)
    - Missing row           → NotFoundError("Thought not found")     (404)
    - Caller is not owner   → PermissionDeniedError                  (403)
    - Message out of range  → ValidationError from the model         (400)
    - SQLAlchemy failures   → DatabaseError (details logged only)    (500)
"""

import logging
import math
import uuid
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thoughts_api.exceptions import (
    DatabaseError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from thoughts_api.models.thought import Thought
from thoughts_api.models.user import User
from thoughts_api.schemas.thought import ThoughtListResponse, ThoughtResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


def parse_thought_id(raw_id: str) -> uuid.UUID:
    """Turn a path segment into a UUID, or raise a 400."""
    try:
        return uuid.UUID(str(raw_id))
    except (ValueError, AttributeError, TypeError):
        raise ValidationError("Invalid ID", field="id", context={"value": str(raw_id)})


class ThoughtService:
    """
    Business logic layer for thought operations.

    Responsibilities:
        - list_thoughts(): Offset pagination, newest first
        - get_thought(): Single lookup with 400/404 handling
        - create_thought(): Validated insert, optional owner
        - like_thought(): Atomic heart increment
        - update_thought() / delete_thought(): Owner-only mutations
    """

    async def list_thoughts(
        self,
        db: AsyncSession,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> ThoughtListResponse:
        """
        Return one page of thoughts sorted by creation time, newest first.

        Pagination:
            offset      = (page - 1) * limit
            totalPages  = ceil(totalThoughts / limit)

        There is no upper bound on `limit`; the route only guarantees both
        values are integers >= 1. A limit or offset too large for the
        driver to bind is reported as a DatabaseError like any other failed
        query.
        """
        offset = (page - 1) * limit
        try:
            count_result = await db.execute(select(func.count(Thought.id)))
            total = count_result.scalar() or 0

            result = await db.execute(
                select(Thought)
                .order_by(Thought.created_at.desc(), Thought.id.desc())
                .offset(offset)
                .limit(limit)
            )
            thoughts = list(result.scalars().all())
        except (SQLAlchemyError, OverflowError) as e:
            logger.error("Database error listing thoughts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not fetch thoughts",
                context={"page": page, "limit": limit, "error_type": type(e).__name__},
            )

        return ThoughtListResponse(
            page=page,
            limit=limit,
            total_thoughts=total,
            total_pages=math.ceil(total / limit),
            results=[ThoughtResponse.model_validate(t) for t in thoughts],
        )

    async def get_thought(self, db: AsyncSession, thought_id: str) -> ThoughtResponse:
        thought = await self._load(db, parse_thought_id(thought_id))
        return ThoughtResponse.model_validate(thought)

    async def create_thought(
        self,
        db: AsyncSession,
        message: Optional[str],
        user: Optional[User] = None,
    ) -> ThoughtResponse:
        """
        Post a new thought.

        The Thought model validates `message` on construction; a logged-in
        caller becomes the owner, anonymous posts get created_by = NULL.
        """
        thought = Thought(message=message, created_by=user.id if user else None)
        try:
            db.add(thought)
            # Flush so id/created_at defaults are populated for the response
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating thought: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save thought",
                context={"error_type": type(e).__name__},
            )

        logger.info("Thought %s created (owner=%s)", thought.id, thought.created_by)
        return ThoughtResponse.model_validate(thought)

    async def like_thought(self, db: AsyncSession, thought_id: str) -> ThoughtResponse:
        """
        Add one heart.

        The increment is a single `UPDATE ... SET hearts = hearts + 1` so
        concurrent likes never lose an update; the row is re-read afterwards.
        """
        tid = parse_thought_id(thought_id)
        try:
            result = await db.execute(
                update(Thought)
                .where(Thought.id == tid)
                .values(hearts=Thought.hearts + 1)
            )
            if result.rowcount == 0:
                raise NotFoundError(resource="thought", resource_id=str(tid))
            thought = await db.get(Thought, tid, populate_existing=True)
        except SQLAlchemyError as e:
            logger.error("Database error liking thought %s: %s", tid, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not like thought",
                context={"thought_id": str(tid)},
            )

        return ThoughtResponse.model_validate(thought)

    async def update_thought(
        self,
        db: AsyncSession,
        thought_id: str,
        message: Optional[str],
        user: User,
    ) -> ThoughtResponse:
        thought = await self._load(db, parse_thought_id(thought_id))
        if not thought.is_owned_by(user.id):
            raise PermissionDeniedError(
                "Not your thought to edit",
                context={"thought_id": str(thought.id), "user_id": str(user.id)},
            )

        thought.message = message
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating thought %s: %s", thought.id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update thought",
                context={"thought_id": str(thought.id)},
            )

        logger.info("Thought %s edited by %s", thought.id, user.id)
        return ThoughtResponse.model_validate(thought)

    async def delete_thought(self, db: AsyncSession, thought_id: str, user: User) -> None:
        thought = await self._load(db, parse_thought_id(thought_id))
        if not thought.is_owned_by(user.id):
            raise PermissionDeniedError(
                "Not your thought to delete",
                context={"thought_id": str(thought.id), "user_id": str(user.id)},
            )

        try:
            await db.delete(thought)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting thought %s: %s", thought.id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete thought",
                context={"thought_id": str(thought.id)},
            )

        logger.info("Thought %s deleted by %s", thought.id, user.id)

    async def _load(self, db: AsyncSession, thought_id: uuid.UUID) -> Thought:
        """Fetch a thought by primary key or raise NotFoundError."""
        try:
            result = await db.execute(select(Thought).where(Thought.id == thought_id))
            thought = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching thought %s: %s", thought_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the thought. Please try again.",
                context={"thought_id": str(thought_id)},
            )

        if thought is None:
            raise NotFoundError(resource="thought", resource_id=str(thought_id))
        return thought


# ── Singleton Instance ────────────────────────────────────────────────────
thought_service = ThoughtService()
