from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from webshop_service.app.models import Course
from webshop_service.app.schemas import CatalogFilter
from webshop_service.app.services import build_catalog_query

COURSES = [
	{"name": "Async Python", "price_cents": 4900, "duration": 300, "tags": "python, async", "difficulty_level": "advanced"},
	{"name": "Django Basics", "price_cents": 1999, "duration": 180, "tags": "python, web", "difficulty_level": "beginner"},
	{"name": "Go Concurrency", "price_cents": 5900, "duration": 240, "tags": "go, concurrency", "difficulty_level": "advanced"},
	{"name": "Intro to SQL", "price_cents": 0, "duration": 90, "tags": "sql, databases", "difficulty_level": "beginner"},
	{"name": "React Hooks", "price_cents": 2999, "duration": 150, "tags": "javascript, web", "difficulty_level": "intermediate"},
	{"name": "Rust Ownership", "price_cents": 3999, "duration": 210, "tags": "rust, 100% safe", "difficulty_level": "intermediate"},
]


@pytest.fixture
async def catalog(client):
	backend = (await client.post("/api/categories", json={"name": "Backend"})).json()
	frontend = (await client.post("/api/categories", json={"name": "Frontend"})).json()
	courses = []
	# shuffled insert order so name ordering is not an accident of insertion
	for data in (COURSES[4], COURSES[0], COURSES[5], COURSES[2], COURSES[3], COURSES[1]):
		category = frontend if data["name"] == "React Hooks" else backend
		response = await client.post("/api/courses", json={**data, "category_id": category["id"]})
		assert response.status_code == 201, response.text
		courses.append(response.json())
	return {"backend": backend, "frontend": frontend, "courses": courses}


async def _search(client, params=None) -> list[dict]:
	response = await client.get("/api/courses", params=params or {})
	assert response.status_code == 200, response.text
	return response.json()


async def test_no_parameters_returns_everything_by_name(client, catalog):
	courses = await _search(client)

	names = [c["name"] for c in courses]
	assert names == sorted(c["name"] for c in COURSES)


async def test_category_is_exact_match(client, catalog):
	courses = await _search(client, {"category": catalog["frontend"]["id"]})

	assert [c["name"] for c in courses] == ["React Hooks"]


async def test_level_is_exact_match(client, catalog):
	courses = await _search(client, {"level": "advanced"})

	assert [c["name"] for c in courses] == ["Async Python", "Go Concurrency"]


@pytest.mark.parametrize(
	"params, low, high",
	[
		({"min": "20", "max": "40"}, 2000, 4000),
		({"max": "29.99"}, None, 2999),
		({"min": "39.99"}, 3999, None),
		({"min": "19.99", "max": "19.99"}, 1999, 1999),
	],
)
async def test_price_bounds_are_inclusive(client, catalog, params, low, high):
	courses = await _search(client, params)

	expected = {
		c["name"]
		for c in COURSES
		if (low is None or c["price_cents"] >= low) and (high is None or c["price_cents"] <= high)
	}
	assert {c["name"] for c in courses} == expected
	assert expected


async def test_fractional_cent_bound_rounds_inwards(client, catalog):
	courses = await _search(client, {"min": "19.995", "max": "29.999"})

	assert [c["name"] for c in courses] == ["React Hooks"]


async def test_min_above_max_matches_nothing(client, catalog):
	assert await _search(client, {"min": "50", "max": "10"}) == []


async def test_single_tag_is_substring_match(client, catalog):
	courses = await _search(client, {"tag": "pyth"})

	assert [c["name"] for c in courses] == ["Async Python", "Django Basics"]


async def test_tag_list_is_or_of_substrings(client, catalog):
	tags = ["rust", "sql", "nothing-matches-this"]
	courses = await _search(client, [("tag", t) for t in tags])

	expected = sorted(c["name"] for c in COURSES if any(t in c["tags"] for t in tags))
	assert [c["name"] for c in courses] == expected == ["Intro to SQL", "Rust Ownership"]


async def test_tag_wildcards_are_literal(client, catalog):
	courses = await _search(client, {"tag": "%"})

	assert [c["name"] for c in courses] == ["Rust Ownership"]


async def test_blank_tag_is_ignored(client, catalog):
	courses = await _search(client, {"tag": "  "})

	assert len(courses) == len(COURSES)


async def test_tag_is_matched_verbatim(client, catalog):
	padded = await _search(client, {"tag": "web "})
	with_comma = await _search(client, {"tag": "python,"})

	assert padded == []
	assert [c["name"] for c in with_comma] == ["Async Python", "Django Basics"]


@pytest.mark.parametrize("path", ["/api/courses", "/courses"])
async def test_huge_max_price_is_no_restriction(client, catalog, path):
	response = await client.get(path, params={"max": "100000000000000000000"})

	assert response.status_code == 200
	if path == "/api/courses":
		assert len(response.json()) == len(COURSES)
	else:
		assert f"{len(COURSES)} courses<" in response.text


@pytest.mark.parametrize("path", ["/api/courses", "/courses"])
async def test_huge_min_price_matches_nothing(client, catalog, path):
	response = await client.get(path, params={"min": "1e30"})

	assert response.status_code == 200
	if path == "/api/courses":
		assert response.json() == []
	else:
		assert "No courses match these filters." in response.text


async def test_filters_combine(client, catalog):
	courses = await _search(
		client,
		[("category", catalog["backend"]["id"]), ("tag", "python"), ("tag", "go"), ("max", "50"), ("sort", "prd")],
	)

	assert [c["name"] for c in courses] == ["Async Python", "Django Basics"]


async def test_price_descending(client, catalog):
	prices = [c["price_cents"] for c in await _search(client, {"sort": "prd"})]

	assert prices == sorted(prices, reverse=True)
	assert len(prices) == len(COURSES)


async def test_price_ascending(client, catalog):
	prices = [c["price_cents"] for c in await _search(client, {"sort": "pra"})]

	assert prices == sorted(prices)


async def test_duration_orderings(client, catalog):
	descending = [c["duration"] for c in await _search(client, {"sort": "dud"})]
	ascending = [c["duration"] for c in await _search(client, {"sort": "dua"})]

	assert descending == sorted(descending, reverse=True)
	assert ascending == sorted(ascending)


async def test_unknown_sort_code_falls_back_to_name(client, catalog):
	courses = await _search(client, {"sort": "cheapest-first"})

	assert [c["name"] for c in courses] == sorted(c["name"] for c in COURSES)


async def test_creation_date_orderings(client, db):
	base = datetime(2024, 1, 1, tzinfo=timezone.utc)
	for offset, name in enumerate(["Oldest", "Middle", "Newest"]):
		db.add(Course(id=uuid4(), name=name, created_at=base + timedelta(days=offset)))
	await db.commit()

	newest_first = [c["name"] for c in await _search(client, {"sort": "nd"})]
	oldest_first = [c["name"] for c in await _search(client, {"sort": "na"})]

	assert newest_first == ["Newest", "Middle", "Oldest"]
	assert oldest_first == ["Oldest", "Middle", "Newest"]


@pytest.mark.parametrize(
	"params",
	[{"min": "abc"}, {"max": "-1"}, {"category": "not-a-uuid"}, {"level": "expert"}],
)
async def test_malformed_parameters_rejected_at_boundary(client, params):
	response = await client.get("/api/courses", params=params)

	assert response.status_code == 422


def test_empty_filter_compiles_to_plain_name_ordering():
	sql = str(build_catalog_query(CatalogFilter()))

	assert "WHERE" not in sql
	assert "ORDER BY courses.name ASC, courses.id" in sql


def test_price_bounds_beyond_column_range_compile_safely():
	unrestricted = build_catalog_query(CatalogFilter(max_price=Decimal("1e30")))
	impossible = build_catalog_query(CatalogFilter(min_price=Decimal("1e30")))

	assert "WHERE" not in str(unrestricted)
	assert "WHERE" in str(impossible)
	assert "price_cents >=" not in str(impossible)


def test_filter_drops_blank_tags_and_accepts_single_string():
	assert CatalogFilter(tags=["web", " ", ""]).tags == ("web",)
	assert CatalogFilter(tags=["web ", " go"]).tags == ("web ", " go")
	assert CatalogFilter(tags="web").tags == ("web",)
	assert CatalogFilter(min_price=Decimal("1.5")).is_empty is False
	assert CatalogFilter(sort="prd").is_empty is True
