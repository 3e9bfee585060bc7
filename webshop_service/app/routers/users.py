from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from common import CurrentUser

from ..database import get_db
from ..models import User
from ..schemas import AdminUserUpdate, UserCreate, UserOut, UserUpdate
from ..security import require_admin
from ..services import UserService
from .crud import make_crud_router


router = make_crud_router(
	prefix="/api/users",
	model=User,
	out_schema=UserOut,
	create_schema=UserCreate,
	update_schema=UserUpdate,
	service_class=UserService,
)

admin_router = APIRouter(prefix="/api/admin/users", tags=["admin"])


@router.get("/name/{username}", response_model=List[UserOut])
async def get_user_by_username(username: str, db: AsyncSession = Depends(get_db)) -> List[UserOut]:
	return await UserService(db).find_by(username=username)


@admin_router.put("/{user_id}", response_model=UserOut)
async def update_user_by_admin(
	user_id: UUID,
	data: AdminUserUpdate,
	_: CurrentUser = Depends(require_admin),
	db: AsyncSession = Depends(get_db),
) -> UserOut:
	return await UserService(db).update(user_id, data)
