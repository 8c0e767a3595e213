"""API Routes — notes, preferences, dashboard and health over HTTP.

Invariants:
    - Every write/read endpoint answers 401 without a live session
    - Domain errors arrive as the structured error envelope
    - A write invalidates the cached dashboard so the next GET is fresh
    - A dashboard read that overlaps a write never repopulates the cache
    - show_reminder is evaluated per request, even for a cached dashboard
"""

import asyncio
from datetime import datetime, timedelta, timezone

from sqlalchemy import text

from activity_notes.api.routes import dashboard as dashboard_route
from activity_notes.core.dashboard_snapshot import DashboardSnapshot
from activity_notes.infrastructure.dashboard_cache import DashboardCache
from activity_notes.models.note import Note

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


# ─── notes ───────────────────────────────────────────────────────

async def test_create_note_requires_session(client):
    res = await client.post(
        "/api/v1/notes",
        json={"title": "T", "category": "Work", "description": "d"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_create_note_uses_stored_default_category(client, auth_headers):
    res = await client.post(
        "/api/v1/notes",
        json={"title": "T", "category": "AnyCategory", "description": "short desc"},
        headers=auth_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["category"] == "Health"
    assert body["priority"] == "Low Priority"
    assert body["title"] == "T"


async def test_create_note_reports_missing_fields(client, auth_headers):
    res = await client.post(
        "/api/v1/notes", json={"category": "Work"}, headers=auth_headers,
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["context"]["fields"] == ["title", "description"]


async def test_cookie_session_is_accepted(client, auth_headers):
    token = auth_headers["Authorization"].removeprefix("Bearer ")
    res = await client.post(
        "/api/v1/notes",
        json={"title": "T", "category": "Work", "description": "d"},
        headers={"Cookie": f"session_token={token}"},
    )
    assert res.status_code == 201


# ─── preferences ─────────────────────────────────────────────────

async def test_save_preferences_returns_normalized(client, auth_headers):
    res = await client.put(
        "/api/v1/preferences",
        json={
            "categories": ["Work", "Work", "Bogus", "Travel", "Health"],
            "default_category": "Bogus",
        },
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.json() == {
        "categories": ["Work", "Travel", "Health"],
        "default_category": "General",
    }


async def test_save_preferences_requires_session(client):
    res = await client.put("/api/v1/preferences", json={"categories": ["Work"]})
    assert res.status_code == 401


async def test_malformed_preferences_body_is_400(client, auth_headers):
    res = await client.put(
        "/api/v1/preferences", json={"categories": "Work"}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# ─── dashboard ───────────────────────────────────────────────────

async def test_dashboard_requires_session(client):
    res = await client.get("/api/v1/dashboard")
    assert res.status_code == 401


async def test_dashboard_lists_notes_and_preferences(client, auth_headers):
    await client.put(
        "/api/v1/preferences",
        json={"categories": ["Health"], "default_category": "Health"},
        headers=auth_headers,
    )
    await client.post(
        "/api/v1/notes",
        json={"title": "Run", "category": "Health", "description": "5k"},
        headers=auth_headers,
    )

    res = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["selected_categories"] == ["Health"]
    assert body["default_category"] == "Health"
    assert [n["title"] for n in body["notes"]] == ["Run"]
    assert body["show_reminder"] is False


async def test_write_invalidates_cached_dashboard(
    client, auth_headers, dashboard_cache: DashboardCache,
):
    first = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert first.json()["notes"] == []
    assert first.json()["show_reminder"] is True

    await client.post(
        "/api/v1/notes",
        json={"title": "Plan", "category": "Work", "description": "sprint"},
        headers=auth_headers,
    )

    second = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert [n["title"] for n in second.json()["notes"]] == ["Plan"]


async def test_dashboard_served_from_cache_until_stale(
    client, auth_headers, seed_user, dashboard_cache: DashboardCache,
):
    await client.get("/api/v1/dashboard", headers=auth_headers)
    cached = dashboard_cache.get(seed_user.id)
    dashboard_cache.put(
        seed_user.id,
        DashboardSnapshot(
            {**cached.payload, "email": "cached@example.com"}, cached.last_note_at,
        ),
        dashboard_cache.generation(),
    )

    res = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert res.json()["email"] == "cached@example.com"


async def test_cached_dashboard_reminder_follows_the_clock(
    client, auth_headers, seed_user, test_db, dashboard_cache, monkeypatch,
):
    test_db.add(Note(
        user_id=seed_user.id, title="Old", category="Health",
        description="d", priority="Low Priority", summary="s", content="c",
        created_at=NOW - timedelta(days=5) + timedelta(hours=1),
    ))
    await test_db.commit()

    monkeypatch.setattr(dashboard_route, "utcnow", lambda: NOW)
    first = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert first.json()["show_reminder"] is False
    assert dashboard_cache.get(seed_user.id) is not None

    monkeypatch.setattr(
        dashboard_route, "utcnow", lambda: NOW + timedelta(hours=2),
    )
    second = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert second.json()["show_reminder"] is True
    assert [n["title"] for n in second.json()["notes"]] == ["Old"]


async def test_dashboard_loaded_across_a_write_is_not_cached(
    client, auth_headers, seed_user, dashboard_cache, monkeypatch,
):
    loaded, release = asyncio.Event(), asyncio.Event()
    real_load = dashboard_route.load_dashboard_snapshot

    async def paused_load(*args, **kwargs):
        snapshot = await real_load(*args, **kwargs)
        loaded.set()
        await release.wait()
        return snapshot

    monkeypatch.setattr(dashboard_route, "load_dashboard_snapshot", paused_load)
    in_flight = asyncio.create_task(
        client.get("/api/v1/dashboard", headers=auth_headers),
    )
    await asyncio.wait_for(loaded.wait(), timeout=5)

    created = await client.post(
        "/api/v1/notes",
        json={"title": "Plan", "category": "Work", "description": "sprint"},
        headers=auth_headers,
    )
    assert created.status_code == 201

    release.set()
    stale = await in_flight
    assert stale.json()["notes"] == []
    assert dashboard_cache.get(seed_user.id) is None

    fresh = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert [n["title"] for n in fresh.json()["notes"]] == ["Plan"]


# ─── health ──────────────────────────────────────────────────────

async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
    assert res.json()["checks"]["schema_revision"] is None
    assert res.json()["checks"]["schema_current"] is False


async def test_readiness_reports_applied_revision(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.execute(text(
            "CREATE TABLE alembic_version (version_num VARCHAR(32) NOT NULL)",
        ))
        await conn.execute(text(
            "INSERT INTO alembic_version (version_num) VALUES ('001_initial')",
        ))

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["schema_revision"] == "001_initial"
    assert res.json()["checks"]["schema_current"] is True


async def test_unauthenticated_response_names_auth_scheme(client):
    res = await client.get("/api/v1/dashboard")
    assert res.status_code == 401
    assert res.headers["www-authenticate"].startswith("Bearer ")
    assert 'cookie="session_token"' in res.headers["www-authenticate"]


async def test_validation_error_has_no_auth_challenge(client, auth_headers):
    res = await client.post(
        "/api/v1/notes", json={"category": "Work"}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert "www-authenticate" not in res.headers
