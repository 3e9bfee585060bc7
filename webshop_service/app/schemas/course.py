from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..models import DifficultyLevelEnum
from .base import PartialUpdate


class CourseOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	name: str
	description: str
	price_cents: int
	duration: int
	tags: str
	difficulty_level: str
	thumbnail_url: str | None = None
	category_id: UUID | None = None
	created_at: datetime
	updated_at: datetime


class CourseCreate(BaseModel):
	model_config = ConfigDict(use_enum_values=True)

	name: str = Field(min_length=1, max_length=255)
	description: str = ""
	price_cents: int = Field(default=0, ge=0)
	duration: int = Field(default=0, ge=0, description="Length in minutes")
	tags: str = Field(default="", max_length=512)
	difficulty_level: DifficultyLevelEnum = DifficultyLevelEnum.BEGINNER
	thumbnail_url: str | None = None
	category_id: UUID | None = None


class CourseUpdate(PartialUpdate):
	model_config = ConfigDict(use_enum_values=True)
	nullable_fields = frozenset({"thumbnail_url", "category_id"})

	name: str | None = Field(default=None, min_length=1, max_length=255)
	description: str | None = None
	price_cents: int | None = Field(default=None, ge=0)
	duration: int | None = Field(default=None, ge=0)
	tags: str | None = Field(default=None, max_length=512)
	difficulty_level: DifficultyLevelEnum | None = None
	thumbnail_url: str | None = None
	category_id: UUID | None = None
