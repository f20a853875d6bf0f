# backend/fittrack/core/deps.py
import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status, Cookie
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.config import settings
from fittrack.core.database import get_session
from fittrack.models.session import Session
from fittrack.models.user import UserType
from fittrack.services.auth.sessions import SessionService, SESSION_COOKIE_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    id: int
    username: str
    type: UserType


@dataclass(frozen=True)
class AuthContext:
    """Identity attached to a request after its session cookie checks out."""
    user: AuthUser
    session: Session

    @property
    def is_admin(self) -> bool:
        return self.user.type == UserType.ADMIN


def get_session_service(
    db: AsyncSession = Depends(get_session),
) -> SessionService:
    """Dependency for the session service."""
    return SessionService(
        db,
        secret=settings.session_cookie_secret,
        expire_days=settings.session_expire_days,
    )


async def get_auth_context(
    request: Request,
    session_cookie: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    sessions: SessionService = Depends(get_session_service),
) -> AuthContext | None:
    """Resolve the session cookie into an auth context, or None."""
    if not session_cookie:
        return None

    session = await sessions.resolve_session(session_cookie)
    if session is None:
        return None

    user = session.user
    auth = AuthContext(
        user=AuthUser(id=user.id, username=user.username, type=user.type),
        session=session,
    )
    request.state.auth = auth
    return auth


async def require_user(
    auth: AuthContext | None = Depends(get_auth_context),
) -> AuthContext:
    if auth is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return auth


async def require_admin(
    auth: AuthContext = Depends(require_user),
) -> AuthContext:
    if not auth.is_admin:
        logger.info(f"User {auth.user.id} denied admin access")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return auth
