"""
TASKFLOW - Session Manager Tests
"""

from datetime import timedelta

import pytest

from taskflow.auth.models import User
from taskflow.auth.repository import SessionRepository, UserRepository
from taskflow.auth.sessions import SessionManager
from taskflow.errors import AuthError
from tests.conftest import FrozenClock


@pytest.fixture
def clock(frozen_now) -> FrozenClock:
    return FrozenClock(frozen_now)


async def create_user(engine) -> User:
    user = User.create(email="a@x.com", password_hash="aa" * 32, salt="bb" * 16)
    return await UserRepository(engine).create(user)


class TestIssueAndResolve:
    @pytest.mark.asyncio
    async def test_issue_then_resolve(self, engine, clock, frozen_now):
        user = await create_user(engine)
        repo = SessionRepository(engine)
        manager = SessionManager(repo, clock=clock)

        session_id = await manager.issue(user.id)
        assert await manager.resolve(session_id) == user.id

        stored = await repo.get(session_id)
        assert stored.created_at == frozen_now
        assert stored.expires_at == frozen_now + timedelta(days=7)

    @pytest.mark.asyncio
    async def test_each_issue_is_a_new_session(self, engine, clock):
        user = await create_user(engine)
        manager = SessionManager(SessionRepository(engine), clock=clock)
        assert await manager.issue(user.id) != await manager.issue(user.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "not-a-uuid"])
    async def test_missing_or_malformed_token(self, engine, clock, token):
        manager = SessionManager(SessionRepository(engine), clock=clock)
        with pytest.raises(AuthError) as exc_info:
            await manager.resolve(token)
        assert exc_info.value.reason == AuthError.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_unknown_token(self, engine, clock):
        manager = SessionManager(SessionRepository(engine), clock=clock)
        with pytest.raises(AuthError):
            await manager.resolve("6f1c2f0e-8a4b-4c1e-9f57-0d6a3b1e2c4d")


class TestExpiry:
    @pytest.mark.asyncio
    async def test_valid_until_just_before_expiry(self, engine, clock):
        user = await create_user(engine)
        manager = SessionManager(SessionRepository(engine), clock=clock)
        session_id = await manager.issue(user.id)

        clock.advance(timedelta(days=7) - timedelta(seconds=1))
        assert await manager.resolve(session_id) == user.id

    @pytest.mark.asyncio
    async def test_expired_at_expires_at_and_lazily_deleted(self, engine, clock):
        user = await create_user(engine)
        repo = SessionRepository(engine)
        manager = SessionManager(repo, clock=clock)
        session_id = await manager.issue(user.id)

        clock.advance(timedelta(days=7))
        with pytest.raises(AuthError):
            await manager.resolve(session_id)
        assert await repo.get(session_id) is None

    @pytest.mark.asyncio
    async def test_expired_session_does_not_come_back(self, engine, clock):
        user = await create_user(engine)
        manager = SessionManager(SessionRepository(engine), clock=clock)
        session_id = await manager.issue(user.id)

        clock.advance(timedelta(days=8))
        with pytest.raises(AuthError):
            await manager.resolve(session_id)

        clock.advance(timedelta(days=-8))
        with pytest.raises(AuthError):
            await manager.resolve(session_id)

    @pytest.mark.asyncio
    async def test_custom_ttl(self, engine, clock):
        user = await create_user(engine)
        manager = SessionManager(SessionRepository(engine), clock=clock, ttl=timedelta(minutes=5))
        session_id = await manager.issue(user.id)

        clock.advance(timedelta(minutes=5))
        with pytest.raises(AuthError):
            await manager.resolve(session_id)


class TestRevoke:
    @pytest.mark.asyncio
    async def test_revoke_deletes_session(self, engine, clock):
        user = await create_user(engine)
        repo = SessionRepository(engine)
        manager = SessionManager(repo, clock=clock)
        session_id = await manager.issue(user.id)

        await manager.revoke(session_id)
        assert await repo.get(session_id) is None
        with pytest.raises(AuthError):
            await manager.resolve(session_id)

    @pytest.mark.asyncio
    async def test_revoke_is_idempotent(self, engine, clock):
        user = await create_user(engine)
        manager = SessionManager(SessionRepository(engine), clock=clock)
        session_id = await manager.issue(user.id)

        await manager.revoke(session_id)
        await manager.revoke(session_id)
        await manager.revoke(None)
        await manager.revoke("garbage")
