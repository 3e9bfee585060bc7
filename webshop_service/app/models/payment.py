from __future__ import annotations

from datetime import datetime
from enum import Enum as PyEnum
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class PaymentStatusEnum(str, PyEnum):
	PENDING = "pending"
	PAID = "paid"
	FAILED = "failed"
	CANCELLED = "cancelled"


class Payment(Base):
	__tablename__ = "payments"

	id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
	user_id: Mapped[UUID | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
	provider: Mapped[str] = mapped_column(String(32), nullable=False, default="manual")
	amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
	currency: Mapped[str] = mapped_column(String(3), nullable=False, default="EUR")
	status: Mapped[str] = mapped_column(String(16), nullable=False, default=PaymentStatusEnum.PENDING.value)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
	)
