from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..database import get_db
from ..models import User
from ..schemas import LoginInput, Token
from ..security import get_app_settings, issue_access_token, verify_password


router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=Token)
async def login(
	data: LoginInput,
	db: AsyncSession = Depends(get_db),
	settings: Settings = Depends(get_app_settings),
) -> Token:
	login_value = data.login.strip()
	# usernames are unique case-sensitively, emails are stored lowercased
	stmt = select(User).where((User.username == login_value) | (User.email == login_value.lower()))
	user = await db.scalar(stmt)
	if not user or not verify_password(data.password, user.hashed_password):
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect login or password")
	if not user.is_active:
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User is inactive")

	return Token(access_token=issue_access_token(user, settings))
