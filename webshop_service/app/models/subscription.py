from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Subscription(Base):
	__tablename__ = "subscriptions"
	__table_args__ = (UniqueConstraint("profile_id", "course_id", name="uq_subscriptions_profile_course"),)

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	profile_id: Mapped[UUID] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
	course_id: Mapped[UUID] = mapped_column(ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
