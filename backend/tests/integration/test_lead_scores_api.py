"""End-to-end tests for the interaction and lead score endpoints."""

import pytest


async def _record(client, client_id: str, interaction_type: str, **extra):
    response = await client.post(
        "/api/v1/interactions",
        json={"client_id": client_id, "interaction_type": interaction_type, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_recording_interaction_creates_score(client):
    body = await _record(client, "acme", "demo_request", source="pricing-page")
    assert body["interaction_type"] == "demo_request"
    assert body["value"] == 0.0

    response = await client.get("/api/v1/lead-scores/acme")
    assert response.status_code == 200
    score = response.json()
    assert score["score"] == 35
    assert score["score_change"] == 35
    assert score["previous_score"] is None
    assert score["tier"] == "cold"
    assert score["factors"] == {
        "engagement": 15,
        "recency": 20,
        "frequency": 0,
        "monetary": 0,
        "behavior": 0,
    }
    assert score["metadata"]["interactions_count"] == 1
    assert score["metadata"]["period"] == 90


@pytest.mark.asyncio
async def test_payment_raises_score_by_ten(client):
    await _record(client, "acme", "demo_request")
    await _record(client, "acme", "payment", value=499.0)

    score = (await client.get("/api/v1/lead-scores/acme")).json()
    assert score["score"] == 45
    assert score["previous_score"] == 35
    assert score["score_change"] == 10

    history = (await client.get("/api/v1/lead-scores/acme/history")).json()
    assert [h["score"] for h in history] == [45, 35]


@pytest.mark.asyncio
async def test_unknown_interaction_type_rejected(client):
    response = await client.post(
        "/api/v1/interactions",
        json={"client_id": "acme", "interaction_type": "carrier_pigeon"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_missing_score_returns_404(client):
    assert (await client.get("/api/v1/lead-scores/ghost")).status_code == 404
    assert (await client.get("/api/v1/lead-scores/ghost/insights")).status_code == 404


@pytest.mark.asyncio
async def test_calculate_without_persist(client):
    response = await client.post("/api/v1/lead-scores/fresh/calculate")
    assert response.status_code == 200
    assert response.json()["score"] == 0
    assert (await client.get("/api/v1/lead-scores/fresh")).status_code == 404

    response = await client.post("/api/v1/lead-scores/fresh/calculate", params={"persist": "true"})
    assert response.status_code == 200
    assert (await client.get("/api/v1/lead-scores/fresh")).status_code == 200


@pytest.mark.asyncio
async def test_calculate_rejects_out_of_range_lookback(client):
    for lookback in (0, 1_000_000):
        response = await client.post(
            "/api/v1/lead-scores/acme/calculate", params={"lookback_days": lookback}
        )
        assert response.status_code == 422, lookback


@pytest.mark.asyncio
async def test_list_interactions_rejects_huge_lookback(client):
    response = await client.get("/api/v1/interactions/acme", params={"lookback_days": 1_000_000})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_recalculate_appends_record(client):
    await _record(client, "acme", "email_open")
    response = await client.post("/api/v1/lead-scores/acme/recalculate")
    assert response.status_code == 200

    history = (await client.get("/api/v1/lead-scores/acme/history")).json()
    assert len(history) == 2
    assert history[0]["score_change"] == 0


@pytest.mark.asyncio
async def test_list_and_distribution(client):
    await _record(client, "cold-co", "email_open")
    for _ in range(10):
        await _record(client, "warm-co", "email_click")
    for interaction_type in ("demo_request", "download", "referral") + ("website_visit",) * 17:
        await _record(client, "hot-co", interaction_type)

    distribution = (await client.get("/api/v1/lead-scores/distribution")).json()
    assert distribution == {"hot": 1, "warm": 1, "cold": 1, "total": 3}

    hot_only = (await client.get("/api/v1/lead-scores", params={"min_score": 80})).json()
    assert {r["client_id"] for r in hot_only} == {"hot-co"}

    bad = await client.get("/api/v1/lead-scores", params={"min_score": 90, "max_score": 10})
    assert bad.status_code == 422


@pytest.mark.asyncio
async def test_insights(client):
    await _record(client, "acme", "website_visit")

    response = await client.get("/api/v1/lead-scores/acme/insights")

    assert response.status_code == 200
    insights = response.json()
    assert insights["current_score"] == 23
    assert insights["tier"] == "cold"
    assert "Increase engagement through targeted campaigns." in insights["recommendations"]
    assert insights["next_actions"][0] == "Re-engage with valuable content"


@pytest.mark.asyncio
async def test_rules_endpoint(client):
    rules = (await client.get("/api/v1/lead-scores/rules")).json()
    assert len(rules) == 17
    assert {"factor": "behavior", "condition": "payment", "points": 10, "description": "Made payment"} in rules


@pytest.mark.asyncio
async def test_list_interactions(client):
    await _record(client, "acme", "email_open")
    await _record(client, "acme", "download")

    listed = (await client.get("/api/v1/interactions/acme")).json()
    assert {i["interaction_type"] for i in listed} == {"email_open", "download"}


@pytest.mark.asyncio
async def test_static_routes_shadow_matching_client_ids(client):
    await _record(client, "rules", "demo_request")

    rules = (await client.get("/api/v1/lead-scores/rules")).json()
    assert len(rules) == 17

    history = (await client.get("/api/v1/lead-scores/rules/history", params={"limit": 1})).json()
    assert len(history) == 1
    assert history[0]["client_id"] == "rules"
    assert history[0]["score"] > 0
