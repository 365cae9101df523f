"""Integration tests for the server-rendered comparison page."""

from __future__ import annotations

import random

import httpx
import pytest

from bias_radar.app.core.config import Settings
from bias_radar.app.main import app
from bias_radar.app.services.analysis_service import AnalysisSimulator
from bias_radar.app.services.comparison_service import (
    NEUTRAL_SUMMARY,
    ComparisonService,
    get_comparison_service,
)
from bias_radar.app.services.session_store import SessionStore, get_session_store

COOKIE = "bias_radar_session"


@pytest.fixture
def page_app():
    store = SessionStore(max_sessions=10, settings=Settings())
    service = ComparisonService(
        simulator=AnalysisSimulator(
            settings=Settings(analysis_delay_seconds=0),
            rng=random.Random(9),
        )
    )
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_comparison_service] = lambda: service
    yield app, store, service
    app.dependency_overrides.clear()


def make_client(test_app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=test_app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_index_renders_empty_form(page_app) -> None:
    test_app, store, _ = page_app

    async with make_client(test_app) as client:
        response = await client.get("/")

    assert response.status_code == 200
    html = response.text
    assert "Bias Radar" in html
    assert "Paste the first article here..." in html
    assert "Analyze Bias" in html
    assert "Neutral Summary" not in html
    assert 'data-busy-label="Analyzing..." disabled' not in html
    assert COOKIE in response.headers["set-cookie"]
    assert len(store) == 1


@pytest.mark.asyncio
async def test_analyze_renders_results_and_keeps_session(page_app) -> None:
    test_app, store, _ = page_app

    async with make_client(test_app) as client:
        response = await client.post(
            "/analyze",
            data={
                "article1": "A devastating, alarming crisis.",
                "article2": "This is a calm report.",
            },
        )
        follow_up = await client.get("/")

    assert response.status_code == 200
    html = response.text
    assert "Analysis Complete" in html
    assert "Article 1 Analysis" in html
    assert "Article 2 Details" in html
    assert "/10" in html
    assert "devastating" in html
    assert NEUTRAL_SUMMARY in html
    assert "Key Contradictions:" in html
    assert "This is a calm report." in html

    # Results persist for the session; the toast does not.
    assert len(store) == 1
    assert "Article 1 Analysis" in follow_up.text
    assert "Analysis Complete" not in follow_up.text


@pytest.mark.asyncio
async def test_missing_article_shows_validation_toast(page_app) -> None:
    test_app, store, _ = page_app

    async with make_client(test_app) as client:
        response = await client.post("/analyze", data={"article1": "", "article2": "Some text"})

    assert response.status_code == 400
    assert "Missing Articles" in response.text
    assert "Please provide both articles to analyze." in response.text
    assert "Article 1 Analysis" not in response.text

    session_id = next(iter(store._sessions))
    session = store.get(session_id)
    assert session.has_results is False
    assert session.is_analyzing is False
    assert session.article2 == "Some text"


@pytest.mark.asyncio
async def test_validation_failure_keeps_previous_results(page_app) -> None:
    test_app, _, _ = page_app

    async with make_client(test_app) as client:
        await client.post("/analyze", data={"article1": "First.", "article2": "Second."})
        response = await client.post("/analyze", data={"article1": "   ", "article2": "Second."})

    assert response.status_code == 400
    assert "Missing Articles" in response.text
    assert "Article 1 Analysis" in response.text


@pytest.mark.asyncio
async def test_busy_session_disables_trigger(page_app) -> None:
    test_app, store, _ = page_app
    session_id, session = store.create()
    session.is_analyzing = True

    async with make_client(test_app) as client:
        client.cookies.set(COOKIE, session_id)
        page = await client.get("/")
        response = await client.post("/analyze", data={"article1": "one", "article2": "two"})

    assert 'data-busy-label="Analyzing..." disabled' in page.text
    assert response.status_code == 409
    assert "Analysis In Progress" in response.text


@pytest.mark.asyncio
async def test_analysis_failure_shows_failure_toast(page_app) -> None:
    test_app, _, service = page_app

    async def failing_analyze(text, *, article_index=None):
        raise RuntimeError("simulated failure")

    service.simulator.analyze = failing_analyze

    async with make_client(test_app) as client:
        response = await client.post("/analyze", data={"article1": "one", "article2": "two"})

    assert response.status_code == 500
    assert "Analysis Failed" in response.text
    assert "Analyze Bias" in response.text


@pytest.mark.asyncio
async def test_static_assets_are_served(page_app) -> None:
    test_app, _, _ = page_app

    async with make_client(test_app) as client:
        response = await client.get("/static/app.js")

    assert response.status_code == 200
    assert "analyze-form" in response.text
