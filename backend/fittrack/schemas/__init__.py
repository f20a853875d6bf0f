from fittrack.schemas.auth import LoginRequest, LoginResponse, MessageResponse
from fittrack.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    PasswordChange,
)
from fittrack.schemas.food import FoodCreate, FoodResponse
from fittrack.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseList
from fittrack.schemas.weight import WeightHistoryResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "PasswordChange",
    "FoodCreate",
    "FoodResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "ExerciseList",
    "WeightHistoryResponse",
]
