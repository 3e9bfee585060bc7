from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import PartialUpdate


class VideoOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	course_id: UUID
	title: str
	url: str
	duration: int
	position: int
	created_at: datetime


class VideoCreate(BaseModel):
	course_id: UUID
	title: str = Field(min_length=1, max_length=255)
	url: str = Field(min_length=1, max_length=1024)
	duration: int = Field(default=0, ge=0, description="Length in seconds")
	position: int = Field(default=0, ge=0)


class VideoUpdate(PartialUpdate):
	title: str | None = Field(default=None, min_length=1, max_length=255)
	url: str | None = Field(default=None, min_length=1, max_length=1024)
	duration: int | None = Field(default=None, ge=0)
	position: int | None = Field(default=None, ge=0)
