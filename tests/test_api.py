import numpy as np
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from lottery_lab.api.deps import get_db, get_rng
from lottery_lab.db import models  # noqa: F401
from lottery_lab.db.base import Base
from lottery_lab.main import app

PASTE = """Mon, Jan 1, 2024
05 12 23 35 48
Power Ball 16
Power Play 2x
Wed, Jan 3, 2024
01 02 03 04 05
PB 6
"""


@pytest.fixture
async def client(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rng] = lambda: np.random.default_rng(7)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()


async def _import(client, source="alice"):
    return await client.post(
        "/api/v1/powerball/import", json={"text": PASTE}, headers={"X-Source-Id": source}
    )


async def test_parse_preview_does_not_store(client):
    resp = await client.post("/api/v1/powerball/parse", json={"text": PASTE})
    assert resp.status_code == 200
    body = resp.json()
    assert body["found"] == 2
    assert body["drawings"][0]["main_numbers"] == [5, 12, 23, 35, 48]
    assert body["drawings"][0]["special"] == 16

    resp = await client.get("/api/v1/powerball/drawings")
    assert resp.json() == []


async def test_unknown_game(client):
    resp = await client.post("/api/v1/keno/parse", json={"text": PASTE})
    assert resp.status_code == 400


async def test_import_skips_stored_dates(client):
    first = (await _import(client)).json()
    assert first["drawings_found"] == 2
    assert first["inserted"] == 2

    second = (await _import(client)).json()
    assert second["inserted"] == 0
    assert second["skipped_existing"] == 2


async def test_import_empty_text(client):
    resp = await client.post("/api/v1/powerball/import", json={"text": "  "})
    assert resp.status_code == 400


async def test_history_most_recent_first(client):
    await _import(client)
    rows = (await client.get("/api/v1/powerball/drawings")).json()
    assert [r["date"] for r in rows] == ["2024-01-03", "2024-01-01"]
    assert rows[0]["source_id"] == "alice"

    rows = (await client.get("/api/v1/powerball/drawings", params={"limit": 1})).json()
    assert len(rows) == 1

    assert (await client.get("/api/v1/cash4life/drawings")).json() == []


async def test_manual_entry(client):
    payload = {"date": "01/06/2024", "main_numbers": [68, 11, 19, 29, 63], "special": 25}
    resp = await client.post("/api/v1/powerball/drawings", json=payload)
    assert resp.status_code == 201
    assert resp.json()["date"] == "2024-01-06"
    assert resp.json()["main_numbers"] == [11, 19, 29, 63, 68]

    resp = await client.post("/api/v1/powerball/drawings", json=payload)
    assert resp.status_code == 409


async def test_manual_entry_out_of_range(client):
    payload = {"date": "2024-01-06", "main_numbers": [1, 2, 3, 4, 5], "special": 30}
    resp = await client.post("/api/v1/powerball/drawings", json=payload)
    assert resp.status_code == 422
    assert resp.json()["detail"]["kind"] == "range_validation_failed"


async def test_delete_requires_creator(client):
    await _import(client)
    rows = (await client.get("/api/v1/powerball/drawings")).json()
    record_id = rows[0]["id"]

    resp = await client.delete(f"/api/v1/powerball/drawings/{record_id}", headers={"X-Source-Id": "bob"})
    assert resp.status_code == 403

    resp = await client.delete(f"/api/v1/powerball/drawings/{record_id}", headers={"X-Source-Id": "alice"})
    assert resp.status_code == 204

    resp = await client.delete(f"/api/v1/powerball/drawings/{record_id}", headers={"X-Source-Id": "alice"})
    assert resp.status_code == 404


async def test_statistics(client):
    await _import(client)
    hot_cold = (await client.get("/api/v1/stats/powerball/hot-cold", params={"limit": 3})).json()
    assert hot_cold["total_draws"] == 2
    assert hot_cold["hot_numbers"] == [5, 1, 2]

    freq = (await client.get("/api/v1/stats/powerball/frequency")).json()
    assert len(freq) == 69
    assert freq[0]["number"] == 5
    assert freq[0]["percentage"] == 100.0

    pairs = (await client.get("/api/v1/stats/powerball/pairs", params={"top_n": 2})).json()
    assert [p["pair"] for p in pairs] == [[1, 2], [1, 3]]

    patterns = (await client.get("/api/v1/stats/powerball/patterns")).json()
    assert patterns["total_draws"] == 2
    assert patterns["odd_even"]["3-2"] == 2


async def test_suggestions_without_history_are_random(client):
    resp = await client.get("/api/v1/suggestions/mega_millions")
    assert resp.status_code == 200
    combos = resp.json()
    assert len(combos) == 7
    assert {c["method"] for c in combos} == {"random"}


async def test_single_strategy(client):
    await _import(client)
    resp = await client.get("/api/v1/suggestions/powerball", params={"strategy": "hot"})
    combos = resp.json()
    assert len(combos) == 1
    assert combos[0]["method"] == "hot"
    assert combos[0]["main_numbers"] == [1, 2, 3, 4, 5]


async def test_accuracy(client):
    await _import(client)
    prediction = {"main_numbers": [1, 2, 3, 4, 5], "special": 6, "method": "hot", "date": "2024-01-03"}
    resp = await client.post("/api/v1/suggestions/powerball/accuracy", json={"predictions": [prediction]})
    assert resp.status_code == 200
    metrics = resp.json()
    assert metrics["exact_matches"] == 1
    assert metrics["main_number_matches"] == [5]
