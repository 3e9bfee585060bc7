from __future__ import annotations

from decimal import Decimal
from typing import List
from uuid import UUID

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from common import CurrentUser

from ..database import get_db
from ..models import Course, DifficultyLevelEnum
from ..schemas import CatalogFilter, CourseCreate, CourseOut, CourseUpdate
from ..security import get_current_user
from ..services import CrudService, search_courses
from .crud import make_crud_router


def catalog_filter_params(
	category: UUID | None = None,
	min_price: Decimal | None = Query(default=None, alias="min", ge=0),
	max_price: Decimal | None = Query(default=None, alias="max", ge=0),
	tag: List[str] | None = Query(default=None),
	level: DifficultyLevelEnum | None = None,
	sort: str | None = None,
) -> CatalogFilter:
	return CatalogFilter(
		category=category,
		level=level,
		min_price=min_price,
		max_price=max_price,
		tags=tag or (),
		sort=sort,
	)


router = make_crud_router(
	prefix="/api/courses",
	model=Course,
	out_schema=CourseOut,
	create_schema=CourseCreate,
	update_schema=CourseUpdate,
	operations=("create", "update", "delete"),
)


@router.get("", response_model=List[CourseOut])
async def list_courses(
	filters: CatalogFilter = Depends(catalog_filter_params),
	db: AsyncSession = Depends(get_db),
) -> List[CourseOut]:
	return await search_courses(db, filters)


@router.get("/{course_id}", response_model=List[CourseOut])
async def get_course(
	course_id: UUID,
	_: CurrentUser = Depends(get_current_user),
	db: AsyncSession = Depends(get_db),
) -> List[CourseOut]:
	return await CrudService(db, Course).get(course_id)
