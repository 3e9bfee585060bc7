from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..models import UserRoleEnum
from .base import PartialUpdate

USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"


class UserOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	username: str
	email: EmailStr
	role: str
	is_active: bool
	created_at: datetime
	updated_at: datetime


class UserCreate(BaseModel):
	username: str = Field(min_length=3, max_length=32, pattern=USERNAME_PATTERN)
	email: EmailStr
	password: str = Field(min_length=8, max_length=128)


class UserUpdate(PartialUpdate):
	username: str | None = Field(default=None, min_length=3, max_length=32, pattern=USERNAME_PATTERN)
	email: EmailStr | None = None
	password: str | None = Field(default=None, min_length=8, max_length=128)


class AdminUserUpdate(UserUpdate):
	model_config = ConfigDict(use_enum_values=True)

	role: UserRoleEnum | None = None
	is_active: bool | None = None
