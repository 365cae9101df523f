from __future__ import annotations

from typing import Any, Dict, List, Literal

from bias_radar.app.core.config import Settings
from bias_radar.app.models import Notification
from bias_radar.app.services.comparison_service import (
    COMPLEMENTARY_POINTS,
    KEY_CONTRADICTIONS,
    ComparisonSession,
)

BiasColor = Literal["low", "medium", "high"]

RESULT_TABS: tuple[tuple[str, str], ...] = (
    ("comparison", "Comparison"),
    ("details", "Detailed Analysis"),
    ("summary", "Neutral Summary"),
    ("insights", "Insights"),
)


def bias_color(bias_score: float) -> BiasColor:
    """Map a bias score to its severity color."""
    if bias_score < 3:
        return "low"
    if bias_score < 6:
        return "medium"
    return "high"


def bias_progress(bias_score: float) -> float:
    """Percentage width of the bias score progress bar."""
    return round(bias_score * 10, 1)


def build_page_context(
    session: ComparisonSession,
    *,
    settings: Settings,
    notifications: List[Notification] | None = None,
) -> Dict[str, Any]:
    """Template context for the comparison page.

    The session is exposed read-only; the page only posts back to the
    analyze route.
    """
    articles = []
    if session.has_results:
        for index, analysis in enumerate((session.analysis1, session.analysis2), start=1):
            articles.append(
                {
                    "index": index,
                    "analysis": analysis,
                    "color": bias_color(analysis.bias_score),
                    "progress": bias_progress(analysis.bias_score),
                }
            )

    return {
        "app_title": settings.app_title,
        "article1": session.article1,
        "article2": session.article2,
        "is_analyzing": session.is_analyzing,
        "has_results": session.has_results,
        "articles": articles,
        "neutral_summary": session.neutral_summary,
        "comparative_insight": session.comparative_insight,
        "complementary_points": COMPLEMENTARY_POINTS,
        "key_contradictions": KEY_CONTRADICTIONS,
        "tabs": RESULT_TABS,
        "notifications": notifications or [],
    }
