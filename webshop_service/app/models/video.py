from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Video(Base):
	__tablename__ = "videos"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	course_id: Mapped[UUID] = mapped_column(ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
	title: Mapped[str] = mapped_column(String(255), nullable=False)
	url: Mapped[str] = mapped_column(String(1024), nullable=False)
	# seconds
	duration: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
	position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
