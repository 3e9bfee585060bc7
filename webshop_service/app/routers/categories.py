from __future__ import annotations

from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import Category
from ..schemas import CategoryCreate, CategoryOut, CategoryUpdate
from ..services import CrudService
from .crud import make_crud_router


router = make_crud_router(
	prefix="/api/categories",
	model=Category,
	out_schema=CategoryOut,
	create_schema=CategoryCreate,
	update_schema=CategoryUpdate,
)


@router.get("/name/{category_name}", response_model=List[CategoryOut])
async def get_category_by_name(category_name: str, db: AsyncSession = Depends(get_db)) -> List[CategoryOut]:
	return await CrudService(db, Category).find_by(name=category_name)
