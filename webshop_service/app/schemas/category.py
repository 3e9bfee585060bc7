from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import PartialUpdate


class CategoryOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	name: str
	description: str
	created_at: datetime


class CategoryCreate(BaseModel):
	name: str = Field(min_length=1, max_length=120)
	description: str = ""


class CategoryUpdate(PartialUpdate):
	name: str | None = Field(default=None, min_length=1, max_length=120)
	description: str | None = None
