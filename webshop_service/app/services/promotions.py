from __future__ import annotations

from typing import Any

from fastapi import status

from ..models import Promotion
from ..schemas.promotion import window_is_inverted
from .crud import CrudService, ServiceError


class PromotionService(CrudService[Promotion]):
	model = Promotion

	def apply_changes(self, obj: Promotion, changes: dict[str, Any]) -> None:
		# a one-sided change is checked against the stored other end
		starts_at = changes.get("starts_at", obj.starts_at)
		ends_at = changes.get("ends_at", obj.ends_at)
		if window_is_inverted(starts_at, ends_at):
			raise ServiceError("ends_at must not be before starts_at", status.HTTP_422_UNPROCESSABLE_ENTITY)
		super().apply_changes(obj, changes)
