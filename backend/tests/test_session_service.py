# backend/tests/test_session_service.py
import pytest
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, timezone, timedelta
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.security import hash_token, sign_token
from fittrack.models.session import Session
from fittrack.models.user import UserType
from fittrack.services.auth.sessions import SessionService, split_cookie

SECRET = "unit-test-secret-0123456789abcdefghij"


def _service(db=None) -> SessionService:
    return SessionService(db or MagicMock(spec=AsyncSession), secret=SECRET)


def _mock_db_returning(row) -> MagicMock:
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = row
    mock_db = MagicMock(spec=AsyncSession)
    mock_db.execute = AsyncMock(return_value=mock_result)
    return mock_db


def test_split_cookie_uses_last_dot():
    assert split_cookie("a.b.sig") == ("a.b", "sig")
    assert split_cookie("token.sig") == ("token", "sig")


def test_split_cookie_rejects_malformed():
    assert split_cookie(None) is None
    assert split_cookie("") is None
    assert split_cookie("nodot") is None
    assert split_cookie(".sig") is None
    assert split_cookie("token.") is None


@pytest.mark.asyncio
async def test_create_session_stores_hashed_token():
    mock_db = MagicMock(spec=AsyncSession)
    mock_db.add = MagicMock()
    mock_db.commit = AsyncMock()
    service = _service(mock_db)

    before = datetime.now(timezone.utc)
    token, session = await service.create_session(user_id=7)

    assert session.id == hash_token(token)
    assert session.id != token
    assert session.user_id == 7
    assert before + timedelta(days=30) <= session.expires_at <= datetime.now(timezone.utc) + timedelta(days=30)
    mock_db.add.assert_called_once_with(session)
    mock_db.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_session_propagates_storage_errors():
    mock_db = MagicMock(spec=AsyncSession)
    mock_db.add = MagicMock()
    mock_db.commit = AsyncMock(side_effect=RuntimeError("db down"))

    with pytest.raises(RuntimeError):
        await _service(mock_db).create_session(user_id=1)


def test_cookie_value_round_trips_through_validation():
    service = _service()
    cookie = service.cookie_value("TOKEN")
    assert cookie == f"TOKEN.{sign_token('TOKEN', SECRET)}"
    assert service.validate_session_token(cookie) is True


def test_validate_rejects_tampered_cookies():
    service = _service()
    cookie = service.cookie_value("TOKEN")
    token, signature = cookie.rsplit(".", 1)

    assert service.validate_session_token(f"OTHER.{signature}") is False
    assert service.validate_session_token(f"{token}.{'0' * 64}") is False
    assert service.validate_session_token(token) is False
    assert service.validate_session_token(f"{token}.") is False
    assert service.validate_session_token(f".{signature}") is False
    assert service.validate_session_token(None) is False


def test_validate_rejects_cookie_signed_with_other_secret():
    cookie = SessionService(MagicMock(), secret="another-secret-0123456789abcdefghij").cookie_value("TOKEN")
    assert _service().validate_session_token(cookie) is False


def test_validate_accepts_token_containing_dots():
    service = _service()
    cookie = f"a.b.{sign_token('a.b', SECRET)}"
    assert service.validate_session_token(cookie) is True


@pytest.mark.asyncio
async def test_resolve_session_skips_lookup_for_bad_signature():
    mock_db = _mock_db_returning(None)
    result = await _service(mock_db).resolve_session("TOKEN.badsignature")

    assert result is None
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_session_returns_none_for_unknown_session():
    mock_db = _mock_db_returning(None)
    service = _service(mock_db)

    assert await service.resolve_session(service.cookie_value("TOKEN")) is None
    mock_db.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_resolve_session_returns_none_when_expired():
    expired = Session(
        id=hash_token("TOKEN"),
        user_id=1,
        expires_at=datetime.now(timezone.utc) - timedelta(seconds=1),
    )
    service = _service(_mock_db_returning(expired))

    assert await service.resolve_session(service.cookie_value("TOKEN")) is None


@pytest.mark.asyncio
async def test_resolve_session_treats_naive_timestamps_as_utc():
    naive_future = (datetime.now(timezone.utc) + timedelta(hours=1)).replace(tzinfo=None)
    row = Session(id=hash_token("TOKEN"), user_id=1, expires_at=naive_future)
    service = _service(_mock_db_returning(row))

    assert await service.resolve_session(service.cookie_value("TOKEN")) is row


@pytest.mark.asyncio
async def test_invalidate_all_sessions_returns_deleted_count():
    mock_result = MagicMock()
    mock_result.rowcount = 3
    mock_db = MagicMock(spec=AsyncSession)
    mock_db.execute = AsyncMock(return_value=mock_result)
    mock_db.commit = AsyncMock()

    deleted = await _service(mock_db).invalidate_all_sessions(user_id=5)

    assert deleted == 3
    mock_db.commit.assert_awaited_once()


# Against a real (in-memory) database

@pytest.mark.asyncio
async def test_create_and_resolve_session(db, make_user):
    user = await make_user("alice", type=UserType.ADMIN)
    service = SessionService(db, secret=SECRET)

    token, _ = await service.create_session(user.id)
    session = await service.resolve_session(service.cookie_value(token))

    assert session is not None
    assert session.user_id == user.id
    assert session.user.username == "alice"
    assert session.user.type == UserType.ADMIN


@pytest.mark.asyncio
async def test_raw_token_is_never_stored(db, make_user):
    user = await make_user("alice")
    service = SessionService(db, secret=SECRET)

    token, _ = await service.create_session(user.id)

    ids = (await db.execute(select(Session.id))).scalars().all()
    assert ids == [hash_token(token)]


@pytest.mark.asyncio
async def test_concurrent_sessions_are_distinct(db, make_user):
    user = await make_user("alice")
    service = SessionService(db, secret=SECRET)

    token_a, _ = await service.create_session(user.id)
    token_b, _ = await service.create_session(user.id)

    assert token_a != token_b
    assert await service.resolve_session(service.cookie_value(token_a)) is not None
    assert await service.resolve_session(service.cookie_value(token_b)) is not None


@pytest.mark.asyncio
async def test_invalidate_all_sessions_revokes_every_device(db, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    service = SessionService(db, secret=SECRET)

    token_a, _ = await service.create_session(alice.id)
    token_b, _ = await service.create_session(alice.id)
    token_bob, _ = await service.create_session(bob.id)

    assert await service.invalidate_all_sessions(alice.id) == 2

    assert await service.resolve_session(service.cookie_value(token_a)) is None
    assert await service.resolve_session(service.cookie_value(token_b)) is None
    assert await service.resolve_session(service.cookie_value(token_bob)) is not None


@pytest.mark.asyncio
async def test_expired_row_is_rejected(db, make_user):
    user = await make_user("alice")
    service = SessionService(db, secret=SECRET)

    token, session = await service.create_session(user.id)
    session.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
    await db.commit()

    assert await service.resolve_session(service.cookie_value(token)) is None


@pytest.mark.asyncio
async def test_session_expiry_is_thirty_days(db, make_user):
    user = await make_user("alice")
    service = SessionService(db, secret=SECRET)
    _, session = await service.create_session(user.id)

    row = (await db.execute(select(Session).where(Session.id == session.id))).scalar_one()
    expires_at = row.expires_at.replace(tzinfo=row.expires_at.tzinfo or timezone.utc)
    remaining = expires_at - datetime.now(timezone.utc)
    assert timedelta(days=29, hours=23) < remaining <= timedelta(days=30)
