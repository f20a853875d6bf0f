# backend/fittrack/api/users.py
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from fittrack.core.database import get_session
from fittrack.core.deps import AuthContext, require_user, require_admin
from fittrack.core.security import hash_password, verify_password
from fittrack.models.user import User
from fittrack.models.weight import WeightHistory, WeightSource
from fittrack.schemas.auth import MessageResponse
from fittrack.schemas.user import UserCreate, UserUpdate, UserResponse, PasswordChange
from fittrack.schemas.weight import WeightHistoryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

# Columns that cannot be cleared through a profile update
REQUIRED_PROFILE_FIELDS = {"username", "name", "last_name", "email"}


def _ensure_self_or_admin(auth: AuthContext, user_id: int) -> None:
    if auth.user.id != user_id and not auth.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own account",
        )


async def _get_user_or_404(db: AsyncSession, user_id: int) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


async def _ensure_unique(
    db: AsyncSession,
    username: str | None,
    email: str | None,
    exclude_id: int | None = None,
) -> None:
    conditions = []
    if username is not None:
        conditions.append(User.username == username)
    if email is not None:
        conditions.append(User.email == email)
    if not conditions:
        return

    query = select(User.id).where(or_(*conditions))
    if exclude_id is not None:
        query = query.where(User.id != exclude_id)

    result = await db.execute(query)
    if result.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already exists",
        )


async def _commit_or_conflict(db: AsyncSession) -> None:
    # Concurrent writers can get past _ensure_unique
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("User write rejected by a unique constraint")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already exists",
        )


@router.get("", response_model=list[UserResponse])
async def list_users(
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_admin),
) -> list[User]:
    """List all users, newest first."""
    result = await db.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
    return list(result.scalars().all())


@router.post("/create", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_admin),
) -> User:
    """Create a user account."""
    await _ensure_unique(db, user_data.username, user_data.email)

    fields = user_data.model_dump(exclude={"password"})
    user = User(**fields, password=hash_password(user_data.password))
    db.add(user)
    await _commit_or_conflict(db)
    await db.refresh(user)

    logger.info(f"Admin {auth.user.id} created user {user.id} ({user.username})")
    return user


@router.get("/me", response_model=UserResponse)
async def get_me(
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_user),
) -> User:
    """Get the authenticated user's profile."""
    result = await db.execute(select(User).where(User.id == auth.user.id))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_user),
) -> User:
    """Update profile fields of a user (self or admin)."""
    _ensure_self_or_admin(auth, user_id)

    updates = {
        field: value
        for field, value in user_data.model_dump(exclude_unset=True).items()
        if value is not None or field not in REQUIRED_PROFILE_FIELDS
    }
    if not updates:
        raise HTTPException(
            status_code=422,
            detail="No valid fields to update",
        )

    user = await _get_user_or_404(db, user_id)
    await _ensure_unique(db, updates.get("username"), updates.get("email"), exclude_id=user_id)

    new_weight = updates.get("weight")
    if new_weight is not None and new_weight != user.weight:
        db.add(WeightHistory(
            user_id=user_id,
            weight=new_weight,
            source=WeightSource.PROFILE_UPDATE,
        ))

    for field, value in updates.items():
        setattr(user, field, value)

    await _commit_or_conflict(db)
    await db.refresh(user)
    return user


@router.get("/{user_id}/weights", response_model=list[WeightHistoryResponse])
async def get_weight_history(
    user_id: int,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    source: WeightSource | None = None,
    limit: int | None = Query(default=None, ge=1, le=1000),
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_user),
) -> list[WeightHistory]:
    """Weight history of a user, newest first."""
    _ensure_self_or_admin(auth, user_id)

    query = select(WeightHistory).where(WeightHistory.user_id == user_id)
    if start_date:
        query = query.where(WeightHistory.date >= start_date)
    if end_date:
        query = query.where(WeightHistory.date <= end_date)
    if source:
        query = query.where(WeightHistory.source == source)

    query = query.order_by(WeightHistory.date.desc(), WeightHistory.id.desc())
    if limit:
        query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())


@router.post("/{user_id}/change-password", response_model=MessageResponse)
async def change_password(
    user_id: int,
    passwords: PasswordChange,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_user),
) -> MessageResponse:
    """Change the caller's own password."""
    if auth.user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only change your own password",
        )

    user = await _get_user_or_404(db, user_id)
    if not verify_password(user.password, passwords.current_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password is incorrect",
        )

    user.password = hash_password(passwords.new_password)
    user.first_login = False
    await db.commit()

    logger.info(f"User {user_id} changed password")
    return MessageResponse(message="Password changed successfully")


@router.get("/{user_id}/info", response_model=UserResponse)
async def get_user_info(
    user_id: int,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_admin),
) -> User:
    """Get a user's details."""
    return await _get_user_or_404(db, user_id)
