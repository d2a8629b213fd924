"""
Thoughts API — Thought SQLAlchemy Model
=========================================

What:  ORM model representing the `thoughts` table.
Why:   Maps Python objects to database rows and enforces the message rules
       at the model level, so every write path goes through the same checks.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by ThoughtService for CRUD operations.

Table Design Rationale:
    - UUID primary key: Non-sequential, so ids in URLs can't be enumerated
    - message: 5-140 characters, validated by `validate_message`
    - hearts: Like counter, only ever changed with an atomic UPDATE
    - created_by: Nullable owner; anonymous thoughts can't be edited or deleted
    - created_at: UTC with timezone (listing is newest first)
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates

from thoughts_api.database import Base
from thoughts_api.exceptions import ValidationError

MESSAGE_MIN_LENGTH = 5
MESSAGE_MAX_LENGTH = 140


class Thought(Base):
    """
    A short text post with a like counter.

    Lifecycle:
        1. Created by POST /thoughts (owner attached when the caller is logged in)
        2. hearts incremented by POST /thoughts/{id}/like
        3. message edited by its owner via PATCH
        4. Deleted by its owner via DELETE
    """

    __tablename__ = "thoughts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    message: Mapped[str] = mapped_column(
        String(MESSAGE_MAX_LENGTH),
        nullable=False,
    )

    hearts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    created_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    __table_args__ = (
        Index("idx_thoughts_created_at", created_at.desc()),
    )

    @validates("message")
    def validate_message(self, key: str, message: Optional[str]) -> str:
        """
        Reject messages outside 5-140 characters.

        Runs on every assignment (constructor and attribute set), so both
        creation and PATCH are covered. Raises our ValidationError so the
        global handler answers 400 with the same wording on both paths.
        """
        if message is None or message == "":
            raise ValidationError("Message is required", field=key)
        if not isinstance(message, str):
            raise ValidationError("Message must be a string", field=key)
        if len(message) < MESSAGE_MIN_LENGTH:
            raise ValidationError("Message too short", field=key)
        if len(message) > MESSAGE_MAX_LENGTH:
            raise ValidationError("Message too long", field=key)
        return message

    def is_owned_by(self, user_id: Optional[uuid.UUID]) -> bool:
        """True only when the thought has an owner and it is `user_id`."""
        return self.created_by is not None and self.created_by == user_id

    def __repr__(self) -> str:
        return f"<Thought(id={self.id}, hearts={self.hearts}, created_by={self.created_by})>"
