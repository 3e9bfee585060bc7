from collections.abc import Iterable
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..services import CrudService

ALL_OPERATIONS = ("list", "get", "create", "update", "delete")


def make_crud_router(
	*,
	prefix: str,
	model: type,
	out_schema: type[BaseModel],
	create_schema: type[BaseModel],
	update_schema: type[BaseModel],
	service_class: type[CrudService] = CrudService,
	operations: Iterable[str] = ALL_OPERATIONS,
	tags: list[str] | None = None,
) -> APIRouter:
	"""
	Build the five uniform REST endpoints for one resource.

	Args:
		prefix: URL prefix, e.g. ``/api/orders``
		model: SQLAlchemy model class
		out_schema: Response model for a single record
		create_schema: Request body for POST
		update_schema: Request body for PUT; only fields sent are changed
		service_class: CrudService subclass doing the ORM work
		operations: Subset of ALL_OPERATIONS to register
		tags: OpenAPI tags, defaults to the last prefix segment

	Returns:
		APIRouter with the requested endpoints
	"""
	router = APIRouter(prefix=prefix, tags=tags or [prefix.rstrip("/").rsplit("/", 1)[-1]])
	enabled = set(operations)

	def get_service(db: AsyncSession = Depends(get_db)) -> CrudService:
		return service_class(db, model)

	if "list" in enabled:

		@router.get("", response_model=list[out_schema])
		async def list_items(service: CrudService = Depends(get_service)):
			return await service.list_all()

	if "get" in enabled:

		@router.get("/{item_id}", response_model=list[out_schema])
		async def get_item(item_id: UUID, service: CrudService = Depends(get_service)):
			return await service.get(item_id)

	if "create" in enabled:

		@router.post("", response_model=out_schema, status_code=status.HTTP_201_CREATED)
		async def create_item(data: create_schema, service: CrudService = Depends(get_service)):  # type: ignore[valid-type]
			return await service.create(data)

	if "update" in enabled:

		@router.put("/{item_id}", response_model=out_schema)
		async def update_item(
			item_id: UUID,
			data: update_schema,  # type: ignore[valid-type]
			service: CrudService = Depends(get_service),
		):
			return await service.update(item_id, data)

	if "delete" in enabled:

		@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
		async def delete_item(item_id: UUID, service: CrudService = Depends(get_service)) -> Response:
			await service.delete(item_id)
			return Response(status_code=status.HTTP_204_NO_CONTENT)

	return router
