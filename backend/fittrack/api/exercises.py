# backend/fittrack/api/exercises.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from fittrack.core.database import get_session
from fittrack.core.deps import AuthContext, require_admin
from fittrack.models.exercise import Exercise
from fittrack.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseList

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.post("", response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED)
async def create_exercise(
    exercise_data: ExerciseCreate,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_admin),
) -> Exercise:
    """Create an exercise."""
    result = await db.execute(select(Exercise).where(Exercise.name == exercise_data.name))
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Exercise with this name already exists",
        )

    exercise = Exercise(**exercise_data.model_dump())
    db.add(exercise)
    await db.commit()
    await db.refresh(exercise)
    return exercise


@router.get("", response_model=ExerciseList)
async def list_exercises(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    name: str | None = None,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_admin),
) -> ExerciseList:
    """List exercises with pagination and an optional name filter."""
    query = select(Exercise)
    count_query = select(func.count(Exercise.id))

    if name:
        query = query.where(Exercise.name.icontains(name, autoescape=True))
        count_query = count_query.where(Exercise.name.icontains(name, autoescape=True))

    total = (await db.execute(count_query)).scalar() or 0

    query = query.order_by(Exercise.name, Exercise.id).offset((page - 1) * limit).limit(limit)
    result = await db.execute(query)
    exercises = result.scalars().all()

    return ExerciseList(
        items=[ExerciseResponse.model_validate(e) for e in exercises],
        total=total,
        page=page,
        page_size=limit,
    )
