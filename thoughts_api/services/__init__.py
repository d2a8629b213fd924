"""
Thoughts API — Services Layer
===============================

What:  Business logic sitting between routes (HTTP) and the database.

Service Inventory:
    - ThoughtService: Pagination, lookups, likes, owner-only edits/deletes
    - UserService:    Registration, login, access-token resolution
    - security:       bcrypt hashing/verification and token generation

Services raise `thoughts_api.exceptions` errors and never build HTTP
responses, so they can be unit-tested with a mocked AsyncSession.
"""
