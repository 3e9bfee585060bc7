from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .base import PartialUpdate


class PromotionOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	code: str
	description: str
	discount_percent: int
	course_id: UUID | None = None
	starts_at: datetime | None = None
	ends_at: datetime | None = None
	created_at: datetime


def _as_utc(value: datetime) -> datetime:
	# SQLite hands back naive datetimes; read them as UTC
	return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def window_is_inverted(starts_at: datetime | None, ends_at: datetime | None) -> bool:
	return bool(starts_at and ends_at and _as_utc(ends_at) < _as_utc(starts_at))


class PromotionCreate(BaseModel):
	code: str = Field(min_length=1, max_length=64)
	description: str = ""
	discount_percent: int = Field(ge=0, le=100)
	course_id: UUID | None = None
	starts_at: datetime | None = None
	ends_at: datetime | None = None

	@model_validator(mode="after")
	def _check_window(self) -> "PromotionCreate":
		if window_is_inverted(self.starts_at, self.ends_at):
			raise ValueError("ends_at must not be before starts_at")
		return self


class PromotionUpdate(PartialUpdate):
	nullable_fields = frozenset({"course_id", "starts_at", "ends_at"})

	code: str | None = Field(default=None, min_length=1, max_length=64)
	description: str | None = None
	discount_percent: int | None = Field(default=None, ge=0, le=100)
	course_id: UUID | None = None
	starts_at: datetime | None = None
	ends_at: datetime | None = None

	@model_validator(mode="after")
	def _check_window(self) -> "PromotionUpdate":
		if window_is_inverted(self.starts_at, self.ends_at):
			raise ValueError("ends_at must not be before starts_at")
		return self
