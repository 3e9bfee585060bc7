from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..models import PaymentStatusEnum
from .base import PartialUpdate


class PaymentOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	user_id: UUID | None = None
	provider: str
	amount_cents: int
	currency: str
	status: str
	created_at: datetime
	updated_at: datetime


class PaymentCreate(BaseModel):
	model_config = ConfigDict(use_enum_values=True)

	user_id: UUID | None = None
	provider: str = Field(default="manual", max_length=32)
	amount_cents: int = Field(ge=0)
	currency: str = Field(default="EUR", min_length=3, max_length=3)
	status: PaymentStatusEnum = PaymentStatusEnum.PENDING


class PaymentUpdate(PartialUpdate):
	model_config = ConfigDict(use_enum_values=True)

	provider: str | None = Field(default=None, max_length=32)
	amount_cents: int | None = Field(default=None, ge=0)
	currency: str | None = Field(default=None, min_length=3, max_length=3)
	status: PaymentStatusEnum | None = None
