"""REST API endpoints for simulated article analysis and comparison."""

from __future__ import annotations

import time
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from bias_radar.app.core.logging import get_logger
from bias_radar.app.models import (
    AnalyzeRequest,
    ArticleComparison,
    CompareRequest,
    ComparisonResponse,
    ResponseMeta,
)
from bias_radar.app.services.comparison_service import (
    COMPLEMENTARY_POINTS,
    KEY_CONTRADICTIONS,
    AnalysisError,
    ArticleValidationError,
    ComparisonService,
    ComparisonSession,
    get_comparison_service,
)
from bias_radar.app.web.presenters import bias_color

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def _build_meta(started: float) -> ResponseMeta:
    return ResponseMeta(
        generated_at=datetime.now(timezone.utc),
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
        correlation_id=structlog.contextvars.get_contextvars().get("correlation_id"),
    )


@router.post("/analyze")
async def analyze_article(
    payload: AnalyzeRequest,
    service: ComparisonService = Depends(get_comparison_service),
) -> dict:
    """Run the simulated analysis on a single article.

    Empty text is accepted; the analysis cannot fail for string input.
    """
    started = time.perf_counter()
    result = await service.simulator.analyze(payload.text)
    return {
        "data": result.model_dump(),
        "meta": _build_meta(started).model_dump(mode="json"),
    }


@router.post("/compare")
async def compare_articles(
    payload: CompareRequest,
    service: ComparisonService = Depends(get_comparison_service),
) -> dict:
    """Analyze two articles concurrently and return the side-by-side comparison.

    Returns 400 if either article is empty and 500 if the analysis fails.
    """
    started = time.perf_counter()
    session = ComparisonSession()

    try:
        result1, result2 = await service.run_analysis(
            session, payload.article1, payload.article2
        )
    except ArticleValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except AnalysisError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc

    response = ComparisonResponse(
        article1=ArticleComparison(analysis=result1, bias_color=bias_color(result1.bias_score)),
        article2=ArticleComparison(analysis=result2, bias_color=bias_color(result2.bias_score)),
        neutral_summary=session.neutral_summary,
        comparative_insight=session.comparative_insight,
        complementary_points=list(COMPLEMENTARY_POINTS),
        key_contradictions=list(KEY_CONTRADICTIONS),
    )

    meta = _build_meta(started)
    logger.info(
        "compare_request_completed",
        duration_ms=meta.duration_ms,
        article1_bias_score=result1.bias_score,
        article2_bias_score=result2.bias_score,
    )

    return {
        "data": response.model_dump(),
        "meta": meta.model_dump(mode="json"),
    }
