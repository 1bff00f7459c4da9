# app/domain/models/user.py
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class User(BaseModel):
    """
    Usuario del sistema. El hash de la contraseña nunca sale en las
    respuestas: se excluye al serializar.
    """
    id: Optional[str] = None
    name: str
    email: str
    role: UserRole = UserRole.USER
    active: bool = True
    password_hash: Optional[str] = Field(default=None, exclude=True)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserFilter(BaseModel):
    active: Optional[bool] = None
    role: Optional[str] = None
    search: Optional[str] = None
