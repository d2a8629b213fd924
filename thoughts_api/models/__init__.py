"""
Thoughts API — ORM Models
===========================

Importing this package registers every table with `Base.metadata`, which
Alembic autogenerate and the test suite's `create_all` both rely on.
"""

from thoughts_api.models.user import User
from thoughts_api.models.thought import Thought

__all__ = ["User", "Thought"]
