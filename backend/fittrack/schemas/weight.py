from datetime import datetime

from pydantic import BaseModel, ConfigDict

from fittrack.models.weight import WeightSource


class WeightHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    weight: float
    date: datetime
    source: WeightSource
    notes: str | None
