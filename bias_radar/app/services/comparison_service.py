"""Run the two-article comparison and own its session state."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from bias_radar.app.core.logging import get_logger, log_exception
from bias_radar.app.models import AnalysisResult, Notification
from bias_radar.app.services.analysis_service import AnalysisSimulator

logger = get_logger(__name__, component="ComparisonService")

NEUTRAL_SUMMARY = (
    "Based on analysis of both articles, this topic presents multiple perspectives "
    "with varying approaches to framing and emphasis. A comprehensive understanding "
    "requires considering the different methodologies, evidence types, and "
    "stakeholder viewpoints presented across both sources."
)

COMPARATIVE_INSIGHT = (
    "The articles differ significantly in their approach and emphasis. While one "
    "focuses more on immediate concerns and emotional impact, the other takes a more "
    "analytical stance. Readers should consider both the quantitative data and "
    "qualitative experiences presented to form a balanced understanding of the issue."
)

COMPLEMENTARY_POINTS: tuple[str, ...] = (
    "Different evidence types provide fuller picture",
    "Various stakeholder perspectives represented",
    "Complementary analytical approaches",
)

KEY_CONTRADICTIONS: tuple[str, ...] = (
    "Different urgency levels emphasized",
    "Conflicting priority assessments",
    "Varying solution effectiveness claims",
)

MISSING_ARTICLES = Notification(
    title="Missing Articles",
    message="Please provide both articles to analyze.",
    severity="destructive",
)
ANALYSIS_COMPLETE = Notification(
    title="Analysis Complete",
    message="Both articles have been analyzed successfully.",
)
ANALYSIS_FAILED = Notification(
    title="Analysis Failed",
    message="There was an error analyzing the articles.",
    severity="destructive",
)
ANALYSIS_IN_PROGRESS = Notification(
    title="Analysis In Progress",
    message="An analysis is already running for this session.",
    severity="destructive",
)


class ComparisonError(Exception):
    """Base class for comparison failures reported to the user."""

    notification: Notification = ANALYSIS_FAILED


class ArticleValidationError(ComparisonError):
    """Raised when either article is empty; no analysis is started."""

    notification = MISSING_ARTICLES


class AnalysisInProgressError(ComparisonError):
    """Raised when a comparison is triggered while the session is busy."""

    notification = ANALYSIS_IN_PROGRESS


class AnalysisError(ComparisonError):
    """Raised when the simulated analysis step fails unexpectedly."""

    notification = ANALYSIS_FAILED


@dataclass(slots=True)
class ComparisonSession:
    """State of one comparison page: inputs, results, busy flag and notifications."""

    article1: str = ""
    article2: str = ""
    analysis1: Optional[AnalysisResult] = None
    analysis2: Optional[AnalysisResult] = None
    neutral_summary: str = ""
    comparative_insight: str = ""
    is_analyzing: bool = False
    notifications: List[Notification] = field(default_factory=list)

    @property
    def has_results(self) -> bool:
        return self.analysis1 is not None and self.analysis2 is not None

    def drain_notifications(self) -> List[Notification]:
        """Return pending notifications and clear them."""
        pending, self.notifications = self.notifications, []
        return pending


Notifier = Callable[[str, str, str], None]


class ComparisonService:
    """Validate inputs, analyze both articles concurrently and update the session."""

    def __init__(self, *, simulator: AnalysisSimulator | None = None) -> None:
        self.simulator = simulator or AnalysisSimulator()

    @staticmethod
    def _session_notifier(session: ComparisonSession) -> Notifier:
        def notify(title: str, message: str, severity: str) -> None:
            session.notifications.append(
                Notification(title=title, message=message, severity=severity)
            )
            logger.info("notification_raised", title=title, severity=severity)

        return notify

    @staticmethod
    def _emit(notify: Notifier, notification: Notification) -> None:
        notify(notification.title, notification.message, notification.severity)

    async def run_analysis(
        self,
        session: ComparisonSession,
        text1: str,
        text2: str,
        *,
        notify: Notifier | None = None,
    ) -> Tuple[AnalysisResult, AnalysisResult]:
        """Analyze both articles and store the results on ``session``.

        Raises:
            ArticleValidationError: If either text is empty or whitespace-only
            AnalysisInProgressError: If the session is already analyzing
            AnalysisError: If the simulated analysis fails
        """
        notify = notify or self._session_notifier(session)
        session.article1 = text1
        session.article2 = text2

        if not text1.strip() or not text2.strip():
            logger.info(
                "comparison_rejected_missing_article",
                article1_empty=not text1.strip(),
                article2_empty=not text2.strip(),
            )
            self._emit(notify, MISSING_ARTICLES)
            raise ArticleValidationError(MISSING_ARTICLES.message)

        if session.is_analyzing:
            self._emit(notify, ANALYSIS_IN_PROGRESS)
            raise AnalysisInProgressError(ANALYSIS_IN_PROGRESS.message)

        session.is_analyzing = True
        logger.info("comparison_start", article1_length=len(text1), article2_length=len(text2))
        try:
            result1, result2 = await asyncio.gather(
                self.simulator.analyze(text1, article_index=1),
                self.simulator.analyze(text2, article_index=2),
            )
        except Exception as exc:
            log_exception(logger, exc, {"phase": "comparison"})
            self._emit(notify, ANALYSIS_FAILED)
            raise AnalysisError(ANALYSIS_FAILED.message) from exc
        finally:
            session.is_analyzing = False

        session.analysis1 = result1
        session.analysis2 = result2
        session.neutral_summary = NEUTRAL_SUMMARY
        session.comparative_insight = COMPARATIVE_INSIGHT
        self._emit(notify, ANALYSIS_COMPLETE)

        logger.info(
            "comparison_completed",
            article1_bias_score=result1.bias_score,
            article2_bias_score=result2.bias_score,
        )
        return result1, result2


_comparison_service: Optional[ComparisonService] = None


def get_comparison_service() -> ComparisonService:
    """Get the global comparison service instance (singleton pattern)."""
    global _comparison_service
    if _comparison_service is None:
        _comparison_service = ComparisonService()
    return _comparison_service
