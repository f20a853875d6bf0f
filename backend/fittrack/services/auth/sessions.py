# backend/fittrack/services/auth/sessions.py
import logging
from datetime import datetime, timedelta, timezone

from fastapi import Response
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from fittrack.core.config import Settings
from fittrack.core.security import generate_session_token, hash_token, sign_token, verify_signature
from fittrack.models.session import Session

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "session"


def _as_utc(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def split_cookie(cookie_value: str | None) -> tuple[str, str] | None:
    """Split ``token.signature`` on the last dot."""
    token, sep, signature = (cookie_value or "").rpartition(".")
    if not sep or not token or not signature:
        return None
    return token, signature


class SessionService:
    """Creates, validates and revokes cookie-backed login sessions.

    The client holds ``token.signature``. Only ``sha256(token)`` is stored,
    as the session id, so a leaked sessions table cannot be replayed.
    """

    def __init__(self, db: AsyncSession, secret: str, expire_days: int = 30):
        self.db = db
        self.secret = secret
        self.expire_days = expire_days

    async def create_session(self, user_id: int) -> tuple[str, Session]:
        """Mint a token and persist its session row.

        Returns the raw token (for the cookie) and the stored row. Storage
        errors propagate; a retry would mint a second token.
        """
        token = generate_session_token()
        session = Session(
            id=hash_token(token),
            user_id=user_id,
            expires_at=datetime.now(timezone.utc) + timedelta(days=self.expire_days),
        )
        self.db.add(session)
        await self.db.commit()

        logger.info(f"Created session {session.id[:8]}... for user {user_id}")
        return token, session

    def cookie_value(self, token: str) -> str:
        return f"{token}.{sign_token(token, self.secret)}"

    def validate_session_token(self, cookie_value: str | None) -> bool:
        """Cheap signature check; no database access."""
        parts = split_cookie(cookie_value)
        if parts is None:
            return False
        token, signature = parts
        return verify_signature(token, signature, self.secret)

    async def resolve_session(self, cookie_value: str | None) -> Session | None:
        """Return the live session (with its user) for a cookie, or None."""
        if not self.validate_session_token(cookie_value):
            logger.debug("Rejected session cookie: bad format or signature")
            return None

        token, _ = split_cookie(cookie_value)
        session_id = hash_token(token)

        result = await self.db.execute(
            select(Session)
            .options(joinedload(Session.user))
            .where(Session.id == session_id)
        )
        session = result.scalar_one_or_none()

        if session is None:
            logger.debug(f"No session found for id {session_id[:8]}...")
            return None

        if _as_utc(session.expires_at) <= datetime.now(timezone.utc):
            logger.debug(f"Session {session_id[:8]}... has expired")
            return None

        return session

    async def invalidate_all_sessions(self, user_id: int) -> int:
        """Delete every session of a user (log out on all devices)."""
        result = await self.db.execute(delete(Session).where(Session.user_id == user_id))
        await self.db.commit()

        deleted = result.rowcount or 0
        logger.info(f"Invalidated {deleted} session(s) for user {user_id}")
        return deleted


def set_session_cookie(response: Response, value: str, settings: Settings) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=value,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        max_age=settings.session_expire_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
