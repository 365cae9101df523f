from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalysisResult(BaseModel):
    """Simulated bias analysis of a single article."""

    model_config = ConfigDict(frozen=True)

    tone: str
    sentiment: str
    bias_score: float = Field(..., ge=0.0, le=10.0)
    emotional_language: List[str] = Field(default_factory=list)
    framing_emphasis: List[str] = Field(default_factory=list)
    framing_omissions: List[str] = Field(default_factory=list)
    key_themes: List[str] = Field(default_factory=list)
    bias_explanation: str
    summary: str


class Notification(BaseModel):
    title: str
    message: str
    severity: Literal["info", "destructive"] = "info"


class AnalyzeRequest(BaseModel):
    text: str = Field(..., description="Raw article text")


class CompareRequest(BaseModel):
    article1: str = Field(default="", description="Raw text of the first article")
    article2: str = Field(default="", description="Raw text of the second article")


class ArticleComparison(BaseModel):
    analysis: AnalysisResult
    bias_color: Literal["low", "medium", "high"]


class ComparisonResponse(BaseModel):
    article1: ArticleComparison
    article2: ArticleComparison
    neutral_summary: str
    comparative_insight: str
    complementary_points: List[str]
    key_contradictions: List[str]


class ResponseMeta(BaseModel):
    generated_at: datetime
    duration_ms: float
    correlation_id: Optional[str] = None
