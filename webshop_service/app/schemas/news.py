from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .base import PartialUpdate


class NewsOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	title: str
	synopsis: str
	body: str
	image_url: str | None = None
	created_at: datetime


class NewsCreate(BaseModel):
	title: str = Field(min_length=1, max_length=255)
	synopsis: str = Field(default="", max_length=1024)
	body: str = ""
	image_url: str | None = None


class NewsUpdate(PartialUpdate):
	nullable_fields = frozenset({"image_url"})

	title: str | None = Field(default=None, min_length=1, max_length=255)
	synopsis: str | None = Field(default=None, max_length=1024)
	body: str | None = None
	image_url: str | None = None


class NewsletterOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	email: EmailStr
	created_at: datetime


class NewsletterCreate(BaseModel):
	email: EmailStr


class NewsletterUpdate(PartialUpdate):
	email: EmailStr | None = None
