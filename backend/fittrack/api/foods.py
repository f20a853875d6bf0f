# backend/fittrack/api/foods.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from fittrack.core.database import get_session
from fittrack.core.deps import AuthContext, require_user, require_admin
from fittrack.models.food import Food
from fittrack.schemas.food import FoodCreate, FoodResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("", response_model=list[FoodResponse])
async def list_foods(
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_admin),
) -> list[Food]:
    """List all foods."""
    result = await db.execute(select(Food).order_by(Food.name))
    return list(result.scalars().all())


@router.post("", response_model=FoodResponse, status_code=status.HTTP_201_CREATED)
async def create_food(
    food_data: FoodCreate,
    db: AsyncSession = Depends(get_session),
    auth: AuthContext = Depends(require_user),
) -> Food:
    """Add a food to the catalogue."""
    result = await db.execute(select(Food).where(Food.name == food_data.name))
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Food with this name already exists",
        )

    food = Food(**food_data.model_dump(), created_by=auth.user.id)
    db.add(food)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info(f"Food {food_data.name!r} violates a unique constraint")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Food with this name or barcode already exists",
        )

    await db.refresh(food)
    return food
