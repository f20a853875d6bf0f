from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from fittrack.models.user import UserType, Gender, ActivityLevel


class UserBase(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    target_weight: float | None = Field(default=None, gt=0)
    country: str | None = None
    city: str | None = None
    phone: str | None = None
    occupation: str | None = None
    date_of_birth: datetime | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None


class UserCreate(UserBase):
    password: str = Field(min_length=8)
    type: UserType = UserType.USER


class UserUpdate(BaseModel):
    """Partial profile update.

    Credentials, role and timestamps are not part of this model; unknown keys
    such as ``password`` or ``type`` are rejected.
    """
    model_config = ConfigDict(extra="forbid")

    username: str | None = Field(default=None, min_length=3, max_length=50)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    target_weight: float | None = Field(default=None, gt=0)
    country: str | None = None
    city: str | None = None
    phone: str | None = None
    occupation: str | None = None
    date_of_birth: datetime | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
    last_name: str
    email: str
    type: UserType
    height: float | None
    weight: float | None
    target_weight: float | None
    country: str | None
    city: str | None
    phone: str | None
    occupation: str | None
    date_of_birth: datetime | None
    gender: Gender | None
    activity_level: ActivityLevel | None
    first_login: bool
    created_at: datetime
    updated_at: datetime | None


class PasswordChange(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "PasswordChange":
        if self.new_password != self.confirm_password:
            raise ValueError("New password and confirmation do not match")
        return self
