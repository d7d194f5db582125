from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=72)


class LoginIn(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    """Public view of a user; never carries the password hash or token."""

    model_config = ConfigDict(from_attributes=True)
    id: int
    username: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginOut(BaseModel):
    token: str
    user: UserOut
