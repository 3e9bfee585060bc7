from __future__ import annotations

from typing import Any

from ..models import User
from ..security import get_password_hash
from .crud import CrudService


class UserService(CrudService[User]):
	"""Users never store or return the plain password."""

	model = User

	def build(self, data: dict[str, Any]) -> User:
		data = dict(data)
		data["email"] = data["email"].lower()
		data["hashed_password"] = get_password_hash(data.pop("password"))
		return super().build(data)

	def apply_changes(self, obj: User, changes: dict[str, Any]) -> None:
		changes = dict(changes)
		password = changes.pop("password", None)
		if password:
			changes["hashed_password"] = get_password_hash(password)
		if changes.get("email"):
			changes["email"] = changes["email"].lower()
		super().apply_changes(obj, changes)
