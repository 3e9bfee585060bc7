"""Shared JWT helpers for the webshop services."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt


bearer_scheme = HTTPBearer(auto_error=True)


@dataclass
class CurrentUser:
	"""Caller identity taken from the access token."""
	id: UUID
	role: str
	token: str


def create_access_token(
	subject: UUID | str,
	*,
	role: str,
	jwt_secret: str,
	jwt_algorithm: str = "HS256",
	expires_delta: timedelta = timedelta(minutes=15),
) -> str:
	"""
	Sign an access token for a user.

	Args:
		subject: User id, stored in the ``sub`` claim
		role: User role, stored in the ``role`` claim
		jwt_secret: Signing key
		jwt_algorithm: Signing algorithm (HS256 by default)
		expires_delta: Token lifetime

	Returns:
		Encoded JWT
	"""
	expire = datetime.now(timezone.utc) + expires_delta
	payload = {
		"sub": str(subject),
		"role": role,
		"type": "access",
		"exp": int(expire.timestamp()),
	}
	return jwt.encode(payload, jwt_secret, algorithm=jwt_algorithm)


def decode_access_token(
	token: str,
	jwt_secret: str,
	jwt_algorithm: str = "HS256",
) -> CurrentUser:
	"""
	Decode and validate an access token.

	Args:
		token: JWT
		jwt_secret: Signing key
		jwt_algorithm: Signing algorithm (HS256 by default)

	Returns:
		CurrentUser with the id and role carried by the token

	Raises:
		HTTPException: If the token is invalid, expired or of the wrong type
	"""
	try:
		payload = jwt.decode(token, jwt_secret, algorithms=[jwt_algorithm])
	except JWTError:
		raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

	if payload.get("type") != "access":
		raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")

	exp = payload.get("exp")
	if exp and datetime.fromtimestamp(exp, tz=timezone.utc) < datetime.now(timezone.utc):
		raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Token expired")

	sub = payload.get("sub")
	if not sub:
		raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
	try:
		user_id = UUID(sub)
	except ValueError:
		raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")

	return CurrentUser(id=user_id, role=payload.get("role") or "user", token=token)


def make_get_current_user(
	settings_dependency: Callable,
) -> Callable:
	"""
	Build a ``get_current_user`` dependency bound to a service's settings.

	Args:
		settings_dependency: Dependency returning an object with jwt_secret
			and jwt_algorithm attributes

	Returns:
		Dependency for use in Depends()
	"""
	async def get_current_user(
		credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
		settings: Any = Depends(settings_dependency),
	) -> CurrentUser:
		return decode_access_token(
			credentials.credentials,
			settings.jwt_secret,
			settings.jwt_algorithm,
		)

	return get_current_user


def make_require_role(
	get_current_user: Callable,
	role: str,
) -> Callable:
	"""
	Build a dependency that only lets through users with the given role.

	Args:
		get_current_user: Dependency produced by make_get_current_user
		role: Required role name

	Returns:
		Dependency returning the CurrentUser, 403 otherwise
	"""
	async def require_role(
		current_user: CurrentUser = Depends(get_current_user),
	) -> CurrentUser:
		if current_user.role != role:
			raise HTTPException(status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
		return current_user

	return require_role
