from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import PartialUpdate


class ProfileOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	user_id: UUID
	first_name: str
	last_name: str
	bio: str
	avatar_url: str | None = None
	created_at: datetime


class ProfileCreate(BaseModel):
	user_id: UUID
	first_name: str = Field(default="", max_length=120)
	last_name: str = Field(default="", max_length=120)
	bio: str = ""
	avatar_url: str | None = None


class ProfileUpdate(PartialUpdate):
	nullable_fields = frozenset({"avatar_url"})

	first_name: str | None = Field(default=None, max_length=120)
	last_name: str | None = Field(default=None, max_length=120)
	bio: str | None = None
	avatar_url: str | None = None
