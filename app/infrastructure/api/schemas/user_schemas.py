# app/infrastructure/api/schemas/user_schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from app.domain.models.user import User, UserRole
from .common import CamelModel, PaginationResponse

PASSWORD_MIN_LENGTH = 6


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ProfileUpdateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=PASSWORD_MIN_LENGTH)


class UserUpdateRequest(ProfileUpdateRequest):
    role: Optional[UserRole] = None
    active: Optional[bool] = None


class UserResponse(CamelModel):
    id: str = Field(alias="_id")
    name: str
    email: str
    role: UserRole
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls.model_validate(user.model_dump())


class AuthResponse(CamelModel):
    user: UserResponse
    token: str


class UserListResponse(CamelModel):
    users: List[UserResponse]
    pagination: PaginationResponse
