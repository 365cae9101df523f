"""Simulated per-article bias analysis.

Scores come from keyword substring matching plus random noise; tone,
sentiment and the framing lists are sampled, not derived from the text.
This stands in for a model-backed analysis that is not wired in.
"""

from __future__ import annotations

import asyncio
import math
import random
import re
from typing import Sequence

from bias_radar.app.core.config import Settings, get_settings
from bias_radar.app.core.logging import get_logger
from bias_radar.app.models import AnalysisResult

logger = get_logger(__name__, component="AnalysisSimulator")

EMOTIONAL_WORDS: tuple[str, ...] = (
    "amazing",
    "terrible",
    "shocking",
    "incredible",
    "devastating",
    "wonderful",
    "awful",
    "fantastic",
    "horrible",
    "brilliant",
    "crisis",
    "urgent",
    "critical",
    "alarming",
    "breakthrough",
)

# Multi-word phrases are matched per token, so they never hit.
BIAS_WORDS: tuple[str, ...] = (
    "clearly",
    "obviously",
    "everyone knows",
    "it's certain",
    "without doubt",
    "definitely",
    "absolutely",
    "undeniably",
    "experts agree",
    "studies show",
)

TONES: tuple[str, ...] = (
    "Neutral and factual",
    "Emotionally charged",
    "Urgently persuasive",
    "Analytically detached",
    "Alarmist",
    "Optimistic",
    "Skeptical",
)

SENTIMENTS: tuple[str, ...] = ("Positive", "Negative", "Neutral", "Mixed")

FRAMING_EMPHASIS: tuple[str, ...] = (
    "Economic impact and statistics",
    "Personal stories and anecdotes",
    "Expert opinions and research",
    "Government policy implications",
    "Long-term consequences",
)

FRAMING_OMISSIONS: tuple[str, ...] = (
    "Alternative viewpoints",
    "Potential counterarguments",
    "Historical context",
    "Economic costs of proposed solutions",
)

KEY_THEMES: tuple[str, ...] = (
    "Environmental concerns",
    "Economic implications",
    "Public health considerations",
    "Policy recommendations",
    "Industry response",
)

HIGH_BIAS_EXPLANATION = (
    "High use of emotional language and definitive statements without "
    "sufficient evidence or counterpoints."
)
MODERATE_BIAS_EXPLANATION = (
    "Moderate bias through selective emphasis and some emotionally charged language."
)
LOW_BIAS_EXPLANATION = (
    "Relatively neutral presentation with balanced language and multiple perspectives."
)

MAX_BIAS_SCORE = 10.0
SUMMARY_ELLIPSIS = "..."

_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Lowercase and split on whitespace runs.

    Leading or trailing whitespace yields empty tokens, which match nothing.
    """
    return _WHITESPACE_RE.split(text.lower())


def count_matching_tokens(tokens: Sequence[str], words: Sequence[str]) -> int:
    """Count tokens containing at least one of ``words`` as a substring."""
    return sum(1 for token in tokens if any(word in token for word in words))


def compute_bias_score(bias_count: int, emotional_count: int, noise: float) -> float:
    """Clamp the weighted counts plus noise into [0, 10], rounded half-up to 1 decimal."""
    raw = bias_count * 2 + emotional_count * 1.5 + noise
    clamped = min(MAX_BIAS_SCORE, max(0.0, raw))
    return math.floor(clamped * 10 + 0.5) / 10


def explain_bias_score(bias_score: float) -> str:
    if bias_score > 7:
        return HIGH_BIAS_EXPLANATION
    if bias_score > 4:
        return MODERATE_BIAS_EXPLANATION
    return LOW_BIAS_EXPLANATION


def find_emotional_language(text: str, limit: int = 4) -> list[str]:
    """Return emotional words present in ``text`` (case-insensitive), in list order."""
    lowered = text.lower()
    return [word for word in EMOTIONAL_WORDS if word in lowered][:limit]


def summarize_text(text: str, max_characters: int = 120) -> str:
    return text[:max_characters] + SUMMARY_ELLIPSIS


class AnalysisSimulator:
    """Produce a randomized pseudo-analysis of an article after a fixed delay."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()

    def _prefix_slice(self, items: Sequence[str], minimum: int) -> list[str]:
        # Length is minimum or minimum + 1.
        return list(items[: minimum + self.rng.randint(0, 1)])

    def build_result(self, text: str) -> AnalysisResult:
        """Compute the analysis synchronously, without the artificial delay."""
        tokens = tokenize(text)
        emotional_count = count_matching_tokens(tokens, EMOTIONAL_WORDS)
        bias_count = count_matching_tokens(tokens, BIAS_WORDS)
        bias_score = compute_bias_score(
            bias_count, emotional_count, self.rng.uniform(0.0, 2.0)
        )

        return AnalysisResult(
            tone=self.rng.choice(TONES),
            sentiment=self.rng.choice(SENTIMENTS),
            bias_score=bias_score,
            emotional_language=find_emotional_language(
                text, limit=self.settings.emotional_language_limit
            ),
            framing_emphasis=self._prefix_slice(FRAMING_EMPHASIS, 3),
            framing_omissions=self._prefix_slice(FRAMING_OMISSIONS, 2),
            key_themes=self._prefix_slice(KEY_THEMES, 3),
            bias_explanation=explain_bias_score(bias_score),
            summary=summarize_text(text, self.settings.summary_max_characters),
        )

    async def analyze(self, text: str, *, article_index: int | None = None) -> AnalysisResult:
        """Analyze ``text`` after the configured delay. Never fails for string input."""
        await asyncio.sleep(self.settings.analysis_delay_seconds)
        result = self.build_result(text)

        logger.info(
            "article_analysis_completed",
            article_index=article_index,
            content_length=len(text),
            emotional_hits=len(result.emotional_language),
            bias_score=result.bias_score,
        )
        return result
