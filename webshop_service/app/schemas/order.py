from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import PartialUpdate


class OrderOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	user_id: UUID | None = None
	payment_id: UUID | None = None
	order_completed: bool
	total_cents: int
	created_at: datetime
	updated_at: datetime


class OrderCreate(BaseModel):
	user_id: UUID | None = None
	payment_id: UUID | None = None
	total_cents: int = Field(default=0, ge=0)


class OrderUpdate(PartialUpdate):
	nullable_fields = frozenset({"payment_id"})

	payment_id: UUID | None = None
	order_completed: bool | None = None
	total_cents: int | None = Field(default=None, ge=0)
