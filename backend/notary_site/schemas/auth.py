from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from notary_site.schemas.common import Name, NonEmptyStr, PartialUpdate


class LoginRequest(BaseModel):
    username: Name
    password: NonEmptyStr


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: EmailStr
    full_name: str
    is_admin: bool
    is_active: bool
    created_at: Optional[datetime] = None


class UserCreate(BaseModel):
    username: Name
    email: EmailStr
    full_name: Name
    password: NonEmptyStr
    is_admin: bool = False
    is_active: bool = True


class UserUpdate(PartialUpdate):
    username: Optional[Name] = None
    email: Optional[EmailStr] = None
    full_name: Optional[Name] = None
    password: Optional[NonEmptyStr] = None
    is_admin: Optional[bool] = None
    is_active: Optional[bool] = None

    required_fields = ("username", "email", "full_name", "password", "is_admin", "is_active")
