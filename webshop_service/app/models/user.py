from __future__ import annotations

from datetime import datetime
from enum import Enum as PyEnum
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class UserRoleEnum(str, PyEnum):
	USER = "user"
	INSTRUCTOR = "instructor"
	ADMIN = "admin"


class User(Base):
	__tablename__ = "users"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	username: Mapped[str] = mapped_column(String(32), unique=True, nullable=False, index=True)
	email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
	hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
	role: Mapped[str] = mapped_column(String(16), nullable=False, default=UserRoleEnum.USER.value)
	is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
	)
