from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import DifficultyLevelEnum


class CatalogFilter(BaseModel):
	"""Optional course search parameters, already validated and typed.

	``min_price``/``max_price`` are in major currency units and inclusive.
	Several ``tags`` are OR-ed together; each one is a substring match
	against the course tag field.
	"""

	model_config = ConfigDict(frozen=True)

	category: UUID | None = None
	level: DifficultyLevelEnum | None = None
	min_price: Decimal | None = Field(default=None, ge=0)
	max_price: Decimal | None = Field(default=None, ge=0)
	tags: tuple[str, ...] = ()
	sort: str | None = None

	@field_validator("tags", mode="before")
	@classmethod
	def _drop_blank_tags(cls, value: object) -> object:
		if value is None:
			return ()
		if isinstance(value, str):
			value = [value]
		return tuple(t for t in value if t and t.strip())

	@property
	def is_empty(self) -> bool:
		return (
			self.category is None
			and self.level is None
			and self.min_price is None
			and self.max_price is None
			and not self.tags
		)
