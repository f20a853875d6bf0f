# backend/fittrack/api/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from fittrack.core.config import settings
from fittrack.core.database import get_session
from fittrack.core.deps import AuthContext, get_session_service, require_user
from fittrack.core.security import verify_password
from fittrack.models.user import User
from fittrack.schemas.auth import LoginRequest, LoginResponse, MessageResponse
from fittrack.schemas.user import UserResponse
from fittrack.services.auth.sessions import SessionService, set_session_cookie, clear_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_session),
    sessions: SessionService = Depends(get_session_service),
) -> LoginResponse:
    """Check credentials and start a new session."""
    result = await db.execute(select(User).where(User.username == credentials.username))
    user = result.scalar_one_or_none()

    # Same answer for unknown user and wrong password
    if not user or not verify_password(user.password, credentials.password):
        logger.info(f"Failed login attempt for username {credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    token, _ = await sessions.create_session(user.id)
    set_session_cookie(response, sessions.cookie_value(token), settings)

    logger.info(f"User {user.id} logged in")
    return LoginResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
    )


@router.post("/logout/{user_id}", response_model=MessageResponse)
async def logout(
    user_id: int,
    response: Response,
    auth: AuthContext = Depends(require_user),
    sessions: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """Log the caller out on every device."""
    if auth.user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only logout your own account",
        )

    await sessions.invalidate_all_sessions(user_id)
    clear_session_cookie(response, settings)
    return MessageResponse(message="Logout successful")
