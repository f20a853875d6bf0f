from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FoodCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    brand: str | None = Field(default=None, max_length=100)
    category: str = Field(min_length=1, max_length=100)
    serving_size: float = Field(gt=0)
    serving_unit: str = Field(min_length=1, max_length=20)
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    fat: float = Field(ge=0)
    carbs: float = Field(ge=0)
    picture: str | None = None
    barcode: str | None = None
    verified: bool = False


class FoodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: str | None
    category: str
    serving_size: float
    serving_unit: str
    calories: float
    protein: float
    fat: float
    carbs: float
    picture: str | None
    barcode: str | None
    verified: bool
    created_by: int
    created_at: datetime
    updated_at: datetime | None
