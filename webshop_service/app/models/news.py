from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class News(Base):
	__tablename__ = "news"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	title: Mapped[str] = mapped_column(String(255), nullable=False)
	synopsis: Mapped[str] = mapped_column(String(1024), default="", nullable=False)
	body: Mapped[str] = mapped_column(Text, default="", nullable=False)
	image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
	created_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
	)


class Newsletter(Base):
	__tablename__ = "newsletters"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
