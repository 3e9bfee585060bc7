from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar
from uuid import UUID

from fastapi import status
from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ServiceError(Exception):
	def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
		super().__init__(message)
		self.message = message
		self.status_code = status_code


def _error_message(exc: SQLAlchemyError) -> str:
	orig = getattr(exc, "orig", None)
	return str(orig) if orig is not None else str(exc)


class CrudService(Generic[ModelT]):
	"""One ORM operation per method; every database failure becomes a ServiceError."""

	model: type[ModelT]

	def __init__(self, db: AsyncSession, model: type[ModelT] | None = None):
		self.db = db
		if model is not None:
			self.model = model

	@property
	def resource_name(self) -> str:
		return self.model.__name__

	@asynccontextmanager
	async def _guard(self, action: str) -> AsyncIterator[None]:
		try:
			yield
		except SQLAlchemyError as exc:
			await self.db.rollback()
			message = _error_message(exc)
			logger.error("%s %s failed: %s", self.resource_name, action, message)
			raise ServiceError(message) from exc

	def build(self, data: dict[str, Any]) -> ModelT:
		return self.model(**data)

	def apply_changes(self, obj: ModelT, changes: dict[str, Any]) -> None:
		for field, value in changes.items():
			setattr(obj, field, value)

	async def list_all(self) -> list[ModelT]:
		stmt = select(self.model).order_by(self.model.created_at, self.model.id)
		async with self._guard("list"):
			result = await self.db.execute(stmt)
			return list(result.scalars().all())

	async def find_by(self, **criteria: Any) -> list[ModelT]:
		stmt = select(self.model).filter_by(**criteria)
		async with self._guard("lookup"):
			result = await self.db.execute(stmt)
			return list(result.scalars().all())

	async def get(self, item_id: UUID) -> list[ModelT]:
		# list of zero or one record, so a missing id is an empty result
		return await self.find_by(id=item_id)

	async def get_one(self, item_id: UUID) -> ModelT:
		async with self._guard("get"):
			obj = await self.db.get(self.model, item_id)
		if obj is None:
			raise ServiceError(f"{self.resource_name} not found", status.HTTP_404_NOT_FOUND)
		return obj

	async def create(self, payload: BaseModel) -> ModelT:
		obj = self.build(payload.model_dump())
		async with self._guard("create"):
			self.db.add(obj)
			await self.db.commit()
			await self.db.refresh(obj)
		logger.info("%s created: %s", self.resource_name, obj.id)
		return obj

	async def update(self, item_id: UUID, payload: BaseModel) -> ModelT:
		obj = await self.get_one(item_id)
		self.apply_changes(obj, payload.model_dump(exclude_unset=True))
		async with self._guard("update"):
			await self.db.commit()
			await self.db.refresh(obj)
		return obj

	async def delete(self, item_id: UUID) -> None:
		stmt = delete(self.model).where(self.model.id == item_id)
		async with self._guard("delete"):
			await self.db.execute(stmt)
			await self.db.commit()
