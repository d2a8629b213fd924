"""
Thoughts API — User SQLAlchemy Model
======================================

What:  ORM model representing the `users` table.
Why:   Registered users own thoughts and authenticate with an access token.
Who:   Created by UserService.register; looked up by email (login) and by
       access token (authentication gate).

Column notes:
    - email: Unique, trimmed and lower-cased before it is stored
    - password: bcrypt hash (never the plaintext)
    - access_token: Hex of 128 random bytes; generated once, never rotated
"""

import re
import uuid
from typing import Optional

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates

from thoughts_api.database import Base
from thoughts_api.exceptions import ValidationError
from thoughts_api.services.security import generate_access_token

EMAIL_MIN_LENGTH = 3
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class User(Base):
    """A registered account. Users are never updated or deleted by the API."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
    )

    password: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
    )

    access_token: Mapped[str] = mapped_column(
        String(512),
        nullable=False,
        unique=True,
        index=True,
        default=generate_access_token,
    )

    @validates("email")
    def validate_email(self, key: str, email: Optional[str]) -> str:
        if not email:
            raise ValidationError("Email is required", field=key)
        email = email.strip().lower()
        if len(email) < EMAIL_MIN_LENGTH or not EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email address", field=key)
        return email

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
