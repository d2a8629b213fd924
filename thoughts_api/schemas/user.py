"""
Thoughts API — User Schemas
=============================

Credentials are Optional on input so that a missing field produces the
service's "Email and password are required" 400 instead of a schema error.
Responses never include the password hash.
"""

import uuid
from typing import Optional

from thoughts_api.schemas.common import ApiModel


class Credentials(ApiModel):
    """Body of POST /register and POST /login."""
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(ApiModel):
    """What a client needs after registering or logging in."""
    email: str
    id: uuid.UUID
    access_token: str
