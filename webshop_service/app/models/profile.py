from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Profile(Base):
	__tablename__ = "profiles"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	user_id: Mapped[UUID] = mapped_column(
		ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True
	)
	first_name: Mapped[str] = mapped_column(String(120), default="", nullable=False)
	last_name: Mapped[str] = mapped_column(String(120), default="", nullable=False)
	bio: Mapped[str] = mapped_column(Text, default="", nullable=False)
	avatar_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
