from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .base import PartialUpdate


class SubscriptionOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: UUID
	profile_id: UUID
	course_id: UUID
	created_at: datetime


class SubscriptionCreate(BaseModel):
	profile_id: UUID
	course_id: UUID


class SubscriptionUpdate(PartialUpdate):
	profile_id: UUID | None = None
	course_id: UUID | None = None
