"""
Thoughts API — Thought Schemas
================================

What:  Request bodies and response models for the /thoughts endpoints.

Why `message` is Optional on input:
    Length and presence rules live on the ORM model (`Thought.validate_message`)
    so a missing message and a short message both come back as a 400 with a
    specific message ("Message is required", "Message too short"), rather than
    FastAPI's generic body validation error.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from thoughts_api.schemas.common import ApiModel


class ThoughtCreate(ApiModel):
    message: Optional[str] = Field(default=None, description="Thought text (5-140 characters)")


class ThoughtUpdate(ApiModel):
    message: Optional[str] = Field(default=None, description="Replacement text (5-140 characters)")


class ThoughtResponse(ApiModel):
    """Full representation of a thought."""
    id: uuid.UUID = Field(description="Unique thought identifier (UUID)")
    message: str
    hearts: int = Field(description="Number of likes")
    created_at: datetime = Field(description="When the thought was posted (UTC)")
    created_by: Optional[uuid.UUID] = Field(
        default=None,
        description="Id of the owning user; null for anonymous thoughts",
    )


class ThoughtListResponse(ApiModel):
    """
    Page of thoughts, newest first.

    Pagination is offset-based: `page` and `limit` come straight from the
    query string and `totalPages` is ceil(totalThoughts / limit).
    """
    page: int
    limit: int
    total_thoughts: int
    total_pages: int
    results: List[ThoughtResponse]
