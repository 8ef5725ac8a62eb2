"""Integration tests for the NextWatch API."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


def media_payload(**overrides) -> dict:
    payload = {
        "tmdb_id": int(uuid4().int % 10_000_000),
        "title": "Arrival",
        "media_type": "movie",
        "overview": "Linguist meets heptapods.",
        "release_date": "2016-11-11",
        "genres": ["Drama", "Science Fiction"],
        "vote_average": 7.6,
        "vote_count": 17000,
        "popularity": 48.213,
        "original_language": "en",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def user_id(client: AsyncClient) -> int:
    """Register a user and return its id."""
    resp = await client.post(
        "/users",
        json={"username": f"user_{uuid4().hex[:8]}", "email": f"u_{uuid4().hex[:8]}@example.com"},
    )
    return resp.json()["id"]


@pytest.fixture
async def guest_id(client: AsyncClient) -> str:
    resp = await client.post("/sessions/guest")
    return resp.json()["session_id"]


# ── Users & sessions ───────────────────────────────


@pytest.mark.asyncio
async def test_create_user(client: AsyncClient):
    resp = await client.post("/users", json={"username": "cinephile", "email": "cine@example.com"})
    assert resp.status_code == 201
    data = resp.json()
    assert "id" in data
    assert data["email"] == "cine@example.com"


@pytest.mark.asyncio
async def test_create_user_duplicate_email(client: AsyncClient):
    payload = {"username": "user1", "email": "dup@example.com"}
    await client.post("/users", json=payload)
    payload["username"] = "user2"
    resp = await client.post("/users", json=payload)
    assert resp.status_code == 409
    assert resp.json()["code"] == "duplicate_identity"


@pytest.mark.asyncio
async def test_create_user_rejects_bad_email(client: AsyncClient):
    resp = await client.post("/users", json={"username": "someone", "email": "not-an-email"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_guest_session(client: AsyncClient):
    resp = await client.post("/sessions/guest")
    assert resp.status_code == 201
    assert resp.json()["session_id"].startswith("guest_")


# ── Media ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_and_lookup_media(client: AsyncClient):
    payload = media_payload()
    resp = await client.post("/media", json=payload)
    assert resp.status_code == 201
    created = resp.json()
    assert created["vote_average"] == 7.6

    resp = await client.get(f"/media/tmdb/{payload['tmdb_id']}")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]

    resp = await client.get(f"/media/tmdb/{payload['tmdb_id']}", params={"media_type": "tv"})
    assert resp.json() is None

    resp = await client.get("/media/tmdb/1")
    assert resp.status_code == 200
    assert resp.json() is None


@pytest.mark.asyncio
async def test_create_media_validates_rating(client: AsyncClient):
    resp = await client.post("/media", json=media_payload(vote_average=11))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_popular_media(client: AsyncClient):
    await client.post("/media", json=media_payload(title="Quiet", popularity=1.0))
    await client.post("/media", json=media_payload(title="Loud", popularity=900.0))
    resp = await client.get("/media/popular", params={"media_type": "movie"})
    assert resp.status_code == 200
    assert [m["title"] for m in resp.json()] == ["Loud", "Quiet"]


@pytest.mark.asyncio
async def test_search_ingests_catalog_results(client: AsyncClient):
    resp = await client.get("/media/search", params={"query": "dune"})
    assert resp.status_code == 200
    ingested = resp.json()
    assert len(ingested) > 0

    resp = await client.get("/media/search", params={"query": "Dune"})
    assert {m["id"] for m in resp.json()} == {m["id"] for m in ingested}


@pytest.mark.asyncio
async def test_search_requires_query(client: AsyncClient):
    resp = await client.get("/media/search", params={"query": ""})
    assert resp.status_code == 422


# ── Interactions ───────────────────────────────────


@pytest.mark.asyncio
async def test_interaction_flow(client: AsyncClient, user_id: int):
    media_id = (await client.post("/media", json=media_payload())).json()["id"]

    resp = await client.post(
        "/interactions",
        json={"user_id": user_id, "media_item_id": media_id, "interaction_type": "like"},
    )
    assert resp.status_code == 201
    first = resp.json()

    resp = await client.post(
        "/interactions",
        json={"user_id": user_id, "media_item_id": media_id, "interaction_type": "watched_liked"},
    )
    assert resp.json()["id"] == first["id"]

    resp = await client.get("/interactions", params={"user_id": user_id})
    assert resp.status_code == 200
    assert [i["interaction_type"] for i in resp.json()] == ["watched_liked"]


@pytest.mark.asyncio
async def test_interaction_requires_actor(client: AsyncClient):
    media_id = (await client.post("/media", json=media_payload())).json()["id"]
    resp = await client.post("/interactions", json={"media_item_id": media_id, "interaction_type": "like"})
    assert resp.status_code == 400
    assert resp.json() == {
        "detail": "Either user_id or session_id must be provided",
        "code": "invalid_actor",
    }

    resp = await client.get("/interactions")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_interaction_unknown_media(client: AsyncClient, guest_id: str):
    resp = await client.post(
        "/interactions",
        json={"session_id": guest_id, "media_item_id": 987654, "interaction_type": "like"},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_interaction_rejects_unknown_kind(client: AsyncClient, guest_id: str):
    resp = await client.post(
        "/interactions",
        json={"session_id": guest_id, "media_item_id": 1, "interaction_type": "love"},
    )
    assert resp.status_code == 422


# ── Recommendations ────────────────────────────────


@pytest.mark.asyncio
async def test_recommendation_swipe_flow(client: AsyncClient, guest_id: str):
    liked = (await client.post("/media", json=media_payload(title="Mad Max", genres=["Action"]))).json()
    action = (
        await client.post(
            "/media", json=media_payload(title="Heat", genres=["Action"], vote_average=8.5, popularity=60.0)
        )
    ).json()
    await client.post("/media", json=media_payload(title="Notebook", genres=["Romance"], vote_average=6.0))
    await client.post(
        "/interactions",
        json={"session_id": guest_id, "media_item_id": liked["id"], "interaction_type": "like"},
    )

    resp = await client.post("/recommendations/generate", json={"session_id": guest_id, "limit": 5})
    assert resp.status_code == 201
    generated = resp.json()
    assert [r["media_item_id"] for r in generated][0] == action["id"]
    assert liked["id"] not in [r["media_item_id"] for r in generated]

    resp = await client.get("/recommendations/next", params={"session_id": guest_id})
    assert resp.status_code == 200
    top = resp.json()
    assert top["media_item_id"] == action["id"]
    assert top["shown"] is True
    assert top["media_item"]["title"] == "Heat"

    for _ in range(len(generated) - 1):
        assert (await client.get("/recommendations/next", params={"session_id": guest_id})).json() is not None
    resp = await client.get("/recommendations/next", params={"session_id": guest_id})
    assert resp.json() is None


@pytest.mark.asyncio
async def test_generate_uses_default_limit(client: AsyncClient, guest_id: str):
    for n in range(15):
        await client.post("/media", json=media_payload(title=f"Film {n}"))
    resp = await client.post("/recommendations/generate", json={"session_id": guest_id})
    assert resp.status_code == 201
    assert len(resp.json()) == 10


@pytest.mark.asyncio
async def test_generate_requires_actor(client: AsyncClient):
    resp = await client.post("/recommendations/generate", json={"limit": 3})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_generate_for_unknown_user_is_not_found(client: AsyncClient):
    await client.post("/media", json=media_payload())
    resp = await client.post("/recommendations/generate", json={"user_id": 999, "limit": 3})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User 999 not found", "code": "not_found"}


@pytest.mark.asyncio
async def test_next_without_actor_is_null(client: AsyncClient):
    resp = await client.get("/recommendations/next")
    assert resp.status_code == 200
    assert resp.json() is None


# ── Watchlist ──────────────────────────────────────


@pytest.mark.asyncio
async def test_watchlist_flow(client: AsyncClient, user_id: int):
    media_id = (await client.post("/media", json=media_payload(title="Paprika"))).json()["id"]
    body = {"user_id": user_id, "media_item_id": media_id}

    first = await client.post("/watchlist", json=body)
    again = await client.post("/watchlist", json=body)
    assert first.status_code == 201
    assert again.json()["id"] == first.json()["id"]

    resp = await client.get("/watchlist", params={"user_id": user_id})
    assert [e["media_item"]["title"] for e in resp.json()] == ["Paprika"]

    resp = await client.post("/watchlist/remove", json=body)
    assert resp.json() == {"success": True}
    resp = await client.get("/watchlist", params={"user_id": user_id})
    assert resp.json() == []


@pytest.mark.asyncio
async def test_watchlist_without_actor(client: AsyncClient):
    resp = await client.post("/watchlist/remove", json={"media_item_id": 1})
    assert resp.json() == {"success": False}
    resp = await client.get("/watchlist")
    assert resp.json() == []


# ── Health Check ───────────────────────────────────


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.json()["service"] == "nextwatch"
