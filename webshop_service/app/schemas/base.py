from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
	"""Body of a PUT: any field may be left out, only nullable columns accept null."""

	nullable_fields: ClassVar[frozenset[str]] = frozenset()

	@model_validator(mode="before")
	@classmethod
	def _reject_nulls(cls, data: Any) -> Any:
		if isinstance(data, dict):
			nulls = sorted(
				name
				for name, value in data.items()
				if value is None and name in cls.model_fields and name not in cls.nullable_fields
			)
			if nulls:
				raise ValueError(f"{', '.join(nulls)} may not be null")
		return data
