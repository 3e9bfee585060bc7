from datetime import timedelta

from fastapi import Request
from passlib.context import CryptContext

from common import create_access_token, make_get_current_user, make_require_role

from .config import Settings
from .models import User, UserRoleEnum


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
	return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
	return pwd_context.hash(password)


def get_app_settings(request: Request) -> Settings:
	return request.app.state.settings


def issue_access_token(user: User, settings: Settings) -> str:
	return create_access_token(
		user.id,
		role=user.role,
		jwt_secret=settings.jwt_secret,
		jwt_algorithm=settings.jwt_algorithm,
		expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
	)


get_current_user = make_get_current_user(get_app_settings)
require_admin = make_require_role(get_current_user, UserRoleEnum.ADMIN.value)
