from uuid import uuid4

import pytest


@pytest.fixture
async def seed(client, create_user, create_course):
	owner = await create_user("owner")
	other = await create_user("other")
	profile = await client.post("/api/profiles", json={"user_id": owner["id"], "first_name": "Olga"})
	assert profile.status_code == 201, profile.text
	course = await create_course("Async Python", price_cents=4900)
	other_course = await create_course("Django Basics", price_cents=1999)
	return {
		"user_id": owner["id"],
		"other_user_id": other["id"],
		"profile_id": profile.json()["id"],
		"course_id": course["id"],
		"other_course_id": other_course["id"],
	}


CASES = [
	(
		"categories",
		lambda s: {"name": "Databases", "description": "SQL"},
		lambda s: {"description": "SQL and NoSQL"},
	),
	(
		"orders",
		lambda s: {"user_id": s["user_id"], "total_cents": 4999},
		lambda s: {"order_completed": True},
	),
	(
		"payments",
		lambda s: {"user_id": s["user_id"], "amount_cents": 4999, "provider": "card"},
		lambda s: {"status": "paid"},
	),
	(
		"profiles",
		lambda s: {"user_id": s["other_user_id"], "first_name": "Ada", "last_name": "Lovelace"},
		lambda s: {"bio": "Mathematician"},
	),
	(
		"promotions",
		lambda s: {"code": "SPRING", "discount_percent": 20, "course_id": s["course_id"]},
		lambda s: {"discount_percent": 25},
	),
	(
		"subscriptions",
		lambda s: {"profile_id": s["profile_id"], "course_id": s["course_id"]},
		lambda s: {"course_id": s["other_course_id"]},
	),
	(
		"videos",
		lambda s: {"course_id": s["course_id"], "title": "Intro", "url": "https://cdn.example.com/intro.mp4", "duration": 120},
		lambda s: {"position": 3},
	),
	(
		"news",
		lambda s: {"title": "Launch", "synopsis": "We are live"},
		lambda s: {"body": "Full story"},
	),
	(
		"newsletters",
		lambda s: {"email": "reader@example.com"},
		lambda s: {"email": "reader2@example.com"},
	),
]


@pytest.mark.parametrize("resource, make_payload, make_changes", CASES, ids=[c[0] for c in CASES])
async def test_crud_round_trip(client, seed, resource, make_payload, make_changes):
	payload = make_payload(seed)
	changes = make_changes(seed)

	created = await client.post(f"/api/{resource}", json=payload)
	assert created.status_code == 201, created.text
	item = created.json()
	for field, value in payload.items():
		assert item[field] == value

	fetched = await client.get(f"/api/{resource}/{item['id']}")
	assert fetched.status_code == 200
	assert fetched.json() == [item]

	listed = await client.get(f"/api/{resource}")
	assert item["id"] in [row["id"] for row in listed.json()]

	updated = await client.put(f"/api/{resource}/{item['id']}", json=changes)
	assert updated.status_code == 200, updated.text
	for field, value in changes.items():
		assert updated.json()[field] == value
	untouched = set(payload) - set(changes)
	for field in untouched:
		assert updated.json()[field] == payload[field]

	deleted = await client.delete(f"/api/{resource}/{item['id']}")
	assert deleted.status_code == 204

	after = await client.get(f"/api/{resource}/{item['id']}")
	assert after.status_code == 200
	assert after.json() == []


async def test_fetch_unknown_id_is_empty_list(client):
	response = await client.get(f"/api/orders/{uuid4()}")

	assert response.status_code == 200
	assert response.json() == []


async def test_update_unknown_id_is_404(client):
	response = await client.put(f"/api/news/{uuid4()}", json={"title": "Nope"})

	assert response.status_code == 404
	assert response.json() == {"detail": "News not found"}


async def test_delete_is_idempotent(client):
	response = await client.delete(f"/api/categories/{uuid4()}")

	assert response.status_code == 204


async def test_malformed_id_is_422(client):
	response = await client.get("/api/videos/not-a-uuid")

	assert response.status_code == 422


async def test_course_update_and_delete(client, create_course):
	course = await create_course("Go Concurrency", price_cents=5900, tags="go")

	updated = await client.put(f"/api/courses/{course['id']}", json={"price_cents": 4900, "difficulty_level": "advanced"})
	assert updated.status_code == 200
	assert updated.json()["price_cents"] == 4900
	assert updated.json()["difficulty_level"] == "advanced"
	assert updated.json()["tags"] == "go"

	assert (await client.delete(f"/api/courses/{course['id']}")).status_code == 204
	assert [c["id"] for c in (await client.get("/api/courses")).json()] == []


async def test_category_lookup_by_name(client):
	await client.post("/api/categories", json={"name": "Backend"})
	await client.post("/api/categories", json={"name": "Frontend"})

	found = await client.get("/api/categories/name/Frontend")
	missing = await client.get("/api/categories/name/Mobile")

	assert [c["name"] for c in found.json()] == ["Frontend"]
	assert missing.json() == []


async def test_duplicate_unique_value_is_500_with_database_message(client):
	first = await client.post("/api/newsletters", json={"email": "dup@example.com"})
	second = await client.post("/api/newsletters", json={"email": "dup@example.com"})

	assert first.status_code == 201
	assert second.status_code == 500
	assert "UNIQUE" in second.json()["detail"].upper()


async def test_missing_foreign_key_is_500(client):
	response = await client.post(
		"/api/videos",
		json={"course_id": str(uuid4()), "title": "Orphan", "url": "https://cdn.example.com/x.mp4"},
	)

	assert response.status_code == 500
	assert "FOREIGN KEY" in response.json()["detail"].upper()


async def test_deleting_course_cascades_to_videos(client, create_course):
	course = await create_course("Rust Ownership")
	video = (
		await client.post(
			"/api/videos",
			json={"course_id": course["id"], "title": "Borrowing", "url": "https://cdn.example.com/b.mp4"},
		)
	).json()

	await client.delete(f"/api/courses/{course['id']}")

	assert (await client.get(f"/api/videos/{video['id']}")).json() == []


@pytest.mark.parametrize(
	"resource, make_payload, changes",
	[
		("categories", lambda s: {"name": "Databases"}, {"name": None}),
		("news", lambda s: {"title": "Launch"}, {"synopsis": None}),
		("orders", lambda s: {"user_id": s["user_id"]}, {"order_completed": None}),
		("subscriptions", lambda s: {"profile_id": s["profile_id"], "course_id": s["course_id"]}, {"course_id": None}),
		("users", lambda s: {"username": "carol", "email": "carol@example.com", "password": "long-enough"}, {"email": None}),
	],
	ids=["categories", "news", "orders", "subscriptions", "users"],
)
async def test_null_on_required_field_is_422(client, seed, resource, make_payload, changes):
	item = (await client.post(f"/api/{resource}", json=make_payload(seed))).json()

	response = await client.put(f"/api/{resource}/{item['id']}", json=changes)

	assert response.status_code == 422
	assert (await client.get(f"/api/{resource}/{item['id']}")).json()[0]["id"] == item["id"]


async def test_null_on_nullable_field_is_accepted(client, create_course):
	course = await create_course("Async Python", thumbnail_url="https://cdn.example.com/a.png")

	response = await client.put(f"/api/courses/{course['id']}", json={"thumbnail_url": None, "category_id": None})

	assert response.status_code == 200
	assert response.json()["thumbnail_url"] is None


async def test_promotion_update_rejects_inverted_window(client):
	promotion = (
		await client.post(
			"/api/promotions",
			json={
				"code": "SPRING",
				"discount_percent": 10,
				"starts_at": "2025-03-01T00:00:00Z",
				"ends_at": "2025-03-31T00:00:00Z",
			},
		)
	).json()
	url = f"/api/promotions/{promotion['id']}"

	both = await client.put(url, json={"starts_at": "2025-04-10T00:00:00Z", "ends_at": "2025-04-01T00:00:00Z"})
	one_sided = await client.put(url, json={"ends_at": "2025-02-01T00:00:00Z"})
	valid = await client.put(url, json={"ends_at": "2025-04-30T00:00:00Z"})

	assert both.status_code == 422
	assert one_sided.status_code == 422
	assert one_sided.json() == {"detail": "ends_at must not be before starts_at"}
	assert valid.status_code == 200
	assert valid.json()["ends_at"].startswith("2025-04-30T00:00:00")


async def test_invalid_body_is_422(client):
	response = await client.post("/api/promotions", json={"code": "BIG", "discount_percent": 150})

	assert response.status_code == 422


async def test_api_index(client):
	response = await client.get("/api/")

	assert response.status_code == 200
	assert response.json() == {"message": "Welcome to the API!"}
