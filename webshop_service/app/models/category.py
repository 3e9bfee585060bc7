from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Category(Base):
	__tablename__ = "categories"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False, index=True)
	description: Mapped[str] = mapped_column(Text, default="", nullable=False)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
