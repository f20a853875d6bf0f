from pydantic import BaseModel, Field

from fittrack.schemas.user import UserResponse


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
