"""
Thoughts API — Thought Service Tests
======================================

What:  Tests for ThoughtService business logic.
How:   Most tests run against the in-memory SQLite session; error-translation
       tests use a mocked AsyncSession that raises SQLAlchemy errors.

What we test:
    ✅ Pagination math (offset, totalPages ceiling, newest first)
    ✅ Lookup: malformed id → ValidationError, missing → NotFoundError
    ✅ Create with and without an owner
    ✅ Likes accumulate one at a time
    ✅ Owner-only edit/delete, including anonymous thoughts
    ✅ SQLAlchemy failures and driver overflows surface as DatabaseError
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from thoughts_api.exceptions import (
    DatabaseError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from thoughts_api.models import Thought, User
from thoughts_api.services.thought_service import ThoughtService, parse_thought_id


async def _make_user(db_session, email="owner@example.com") -> User:
    user = User(email=email, password="not-a-real-hash")
    db_session.add(user)
    await db_session.flush()
    return user


async def _make_thought(db_session, message, minutes_ago=0, hearts=0, created_by=None) -> Thought:
    thought = Thought(
        message=message,
        hearts=hearts,
        created_by=created_by,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )
    db_session.add(thought)
    await db_session.flush()
    return thought


class TestParseThoughtId:

    def test_valid_uuid(self):
        value = uuid.uuid4()
        assert parse_thought_id(str(value)) == value

    @pytest.mark.parametrize("raw", ["123", "not-a-uuid", ""])
    def test_malformed_id(self, raw):
        with pytest.raises(ValidationError, match="Invalid ID"):
            parse_thought_id(raw)


class TestListThoughts:

    def setup_method(self):
        self.service = ThoughtService()

    @pytest.mark.asyncio
    async def test_empty_store(self, db_session):
        result = await self.service.list_thoughts(db_session)

        assert result.page == 1
        assert result.limit == 5
        assert result.total_thoughts == 0
        assert result.total_pages == 0
        assert result.results == []

    @pytest.mark.asyncio
    async def test_pages_are_newest_first(self, db_session):
        for minutes_ago in range(5):
            await _make_thought(db_session, f"thought number {minutes_ago}", minutes_ago=minutes_ago)

        first = await self.service.list_thoughts(db_session, page=1, limit=2)
        third = await self.service.list_thoughts(db_session, page=3, limit=2)

        assert [t.message for t in first.results] == ["thought number 0", "thought number 1"]
        assert [t.message for t in third.results] == ["thought number 4"]
        assert first.total_thoughts == 5
        assert first.total_pages == 3

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, db_session):
        await _make_thought(db_session, "only one here")

        result = await self.service.list_thoughts(db_session, page=4, limit=5)

        assert result.results == []
        assert result.total_pages == 1

    @pytest.mark.asyncio
    async def test_database_failure_is_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        with pytest.raises(DatabaseError, match="Could not fetch thoughts"):
            await self.service.list_thoughts(mock_db_session)

    @pytest.mark.asyncio
    async def test_driver_overflow_is_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OverflowError("Python int too large to convert to SQLite INTEGER")
        )

        with pytest.raises(DatabaseError, match="Could not fetch thoughts") as exc_info:
            await self.service.list_thoughts(mock_db_session, limit=10**20)
        assert exc_info.value.context["error_type"] == "OverflowError"

    @pytest.mark.asyncio
    async def test_limit_beyond_sqlite_integer_range(self, db_session):
        await _make_thought(db_session, "a single thought")

        with pytest.raises(DatabaseError, match="Could not fetch thoughts"):
            await self.service.list_thoughts(db_session, page=1, limit=10**20)


class TestGetThought:

    def setup_method(self):
        self.service = ThoughtService()

    @pytest.mark.asyncio
    async def test_found(self, db_session):
        thought = await _make_thought(db_session, "look me up", hearts=3)

        result = await self.service.get_thought(db_session, str(thought.id))

        assert result.id == thought.id
        assert result.message == "look me up"
        assert result.hearts == 3

    @pytest.mark.asyncio
    async def test_not_found(self, db_session):
        with pytest.raises(NotFoundError, match="Thought not found"):
            await self.service.get_thought(db_session, str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_id_does_not_query(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.get_thought(mock_db_session, "abc")
        mock_db_session.execute.assert_not_awaited()


class TestCreateThought:

    def setup_method(self):
        self.service = ThoughtService()

    @pytest.mark.asyncio
    async def test_anonymous(self, db_session):
        result = await self.service.create_thought(db_session, "hello world")

        assert result.message == "hello world"
        assert result.hearts == 0
        assert result.created_by is None
        assert isinstance(result.created_at, datetime)

    @pytest.mark.asyncio
    async def test_owner_attached(self, db_session):
        user = await _make_user(db_session)

        result = await self.service.create_thought(db_session, "owned thought", user=user)

        assert result.created_by == user.id

    @pytest.mark.asyncio
    async def test_invalid_message_is_not_added(self, mock_db_session):
        with pytest.raises(ValidationError, match="Message too long"):
            await self.service.create_thought(mock_db_session, "x" * 141)
        mock_db_session.add.assert_not_called()


class TestLikeThought:

    def setup_method(self):
        self.service = ThoughtService()

    @pytest.mark.asyncio
    async def test_two_likes_add_two_hearts(self, db_session):
        thought = await _make_thought(db_session, "please like me", hearts=4)

        await self.service.like_thought(db_session, str(thought.id))
        result = await self.service.like_thought(db_session, str(thought.id))

        assert result.hearts == 6

    @pytest.mark.asyncio
    async def test_missing_thought(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.like_thought(db_session, str(uuid.uuid4()))


class TestOwnerMutations:

    def setup_method(self):
        self.service = ThoughtService()

    @pytest.mark.asyncio
    async def test_owner_can_edit(self, db_session):
        user = await _make_user(db_session)
        thought = await _make_thought(db_session, "first draft", created_by=user.id)

        result = await self.service.update_thought(db_session, str(thought.id), "second draft", user)

        assert result.message == "second draft"

    @pytest.mark.asyncio
    async def test_edit_validates_message(self, db_session):
        user = await _make_user(db_session)
        thought = await _make_thought(db_session, "first draft", created_by=user.id)

        with pytest.raises(ValidationError, match="Message too short"):
            await self.service.update_thought(db_session, str(thought.id), "no", user)

    @pytest.mark.asyncio
    async def test_stranger_cannot_edit(self, db_session):
        owner = await _make_user(db_session, "owner@example.com")
        stranger = await _make_user(db_session, "stranger@example.com")
        thought = await _make_thought(db_session, "hands off please", created_by=owner.id)

        with pytest.raises(PermissionDeniedError, match="Not your thought to edit"):
            await self.service.update_thought(db_session, str(thought.id), "defaced!", stranger)

    @pytest.mark.asyncio
    async def test_anonymous_thought_cannot_be_deleted(self, db_session):
        user = await _make_user(db_session)
        thought = await _make_thought(db_session, "nobody owns me")

        with pytest.raises(PermissionDeniedError, match="Not your thought to delete"):
            await self.service.delete_thought(db_session, str(thought.id), user)

    @pytest.mark.asyncio
    async def test_owner_can_delete(self, db_session):
        user = await _make_user(db_session)
        thought = await _make_thought(db_session, "delete me soon", created_by=user.id)

        await self.service.delete_thought(db_session, str(thought.id), user)

        remaining = await db_session.execute(select(func.count(Thought.id)))
        assert remaining.scalar() == 0

    @pytest.mark.asyncio
    async def test_delete_missing_thought(self, db_session):
        user = await _make_user(db_session)

        with pytest.raises(NotFoundError):
            await self.service.delete_thought(db_session, str(uuid.uuid4()), user)

    @pytest.mark.asyncio
    async def test_stranger_check_uses_loaded_row(self, mock_db_session):
        thought = Thought(
            id=uuid.uuid4(),
            message="mocked thought",
            hearts=0,
            created_at=datetime.now(timezone.utc),
            created_by=uuid.uuid4(),
        )
        stranger = MagicMock(id=uuid.uuid4())
        result = MagicMock()
        result.scalar_one_or_none.return_value = thought
        mock_db_session.execute.return_value = result

        with pytest.raises(PermissionDeniedError):
            await self.service.delete_thought(mock_db_session, str(thought.id), stranger)
        mock_db_session.delete.assert_not_awaited()
