from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from sqlalchemy import Select, false, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Course
from ..schemas import CatalogFilter

DEFAULT_ORDERING = (Course.name.asc(),)

SORT_ORDERINGS = {
	"prd": (Course.price_cents.desc(),),
	"pra": (Course.price_cents.asc(),),
	"nd": (Course.created_at.desc(),),
	"na": (Course.created_at.asc(),),
	"dud": (Course.duration.desc(),),
	"dua": (Course.duration.asc(),),
}


# courses.price_cents is a 32-bit INTEGER column
MAX_PRICE_CENTS = 2**31 - 1
MAX_PRICE = Decimal(MAX_PRICE_CENTS) / 100


def _to_cents(amount: Decimal, rounding: str) -> int:
	return int((amount * 100).to_integral_value(rounding=rounding))


def build_catalog_query(filters: CatalogFilter) -> Select:
	"""Compile a CatalogFilter into one SELECT over courses.

	Price bounds are rounded inwards when converted to cents (min up, max
	down) so that both ends stay inclusive for the stored integer prices.
	A bound beyond the column range is resolved here: a too-large minimum
	matches nothing and a too-large maximum is no restriction.
	"""
	stmt = select(Course)

	if filters.category is not None:
		stmt = stmt.where(Course.category_id == filters.category)

	if filters.level is not None:
		stmt = stmt.where(Course.difficulty_level == filters.level.value)

	if filters.min_price is not None:
		if filters.min_price > MAX_PRICE:
			stmt = stmt.where(false())
		else:
			stmt = stmt.where(Course.price_cents >= _to_cents(filters.min_price, ROUND_CEILING))
	if filters.max_price is not None:
		if filters.max_price < MAX_PRICE:
			stmt = stmt.where(Course.price_cents <= _to_cents(filters.max_price, ROUND_FLOOR))

	if filters.tags:
		stmt = stmt.where(or_(*(Course.tags.contains(tag, autoescape=True) for tag in filters.tags)))

	ordering = SORT_ORDERINGS.get(filters.sort or "", DEFAULT_ORDERING)
	return stmt.order_by(*ordering, Course.id)


async def search_courses(db: AsyncSession, filters: CatalogFilter) -> list[Course]:
	result = await db.execute(build_catalog_query(filters))
	return list(result.scalars().all())
