from __future__ import annotations

from datetime import datetime
from enum import Enum as PyEnum
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class DifficultyLevelEnum(str, PyEnum):
	BEGINNER = "beginner"
	INTERMEDIATE = "intermediate"
	ADVANCED = "advanced"


class Course(Base):
	__tablename__ = "courses"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
	description: Mapped[str] = mapped_column(Text, default="", nullable=False)
	price_cents: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
	# minutes
	duration: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
	# free text, e.g. "python, web, async"
	tags: Mapped[str] = mapped_column(String(512), default="", nullable=False)
	difficulty_level: Mapped[str] = mapped_column(
		String(32), default=DifficultyLevelEnum.BEGINNER.value, nullable=False, index=True
	)
	thumbnail_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
	category_id: Mapped[UUID | None] = mapped_column(
		ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
	)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
	)
