from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Promotion(Base):
	__tablename__ = "promotions"
	__table_args__ = (
		CheckConstraint("discount_percent >= 0 AND discount_percent <= 100", name="ck_promotions_discount_range"),
	)

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	code: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
	description: Mapped[str] = mapped_column(Text, default="", nullable=False)
	discount_percent: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
	course_id: Mapped[UUID | None] = mapped_column(
		ForeignKey("courses.id", ondelete="CASCADE"), nullable=True, index=True
	)
	starts_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
	ends_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
