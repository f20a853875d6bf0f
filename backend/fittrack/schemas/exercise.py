from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCreate(BaseModel):
    name: str = Field(min_length=1, max_length=300)
    notes: str | None = Field(default=None, max_length=400)
    alternative: str | None = Field(default=None, max_length=100)
    video: str | None = None


class ExerciseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    notes: str | None
    alternative: str | None
    video: str | None
    created_at: datetime
    updated_at: datetime | None


class ExerciseList(BaseModel):
    items: list[ExerciseResponse]
    total: int
    page: int
    page_size: int
