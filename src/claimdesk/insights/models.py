"""Pydantic models for AI insights results and LLM response payloads."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

InsightCategory = Literal["efficiency", "risk", "opportunity", "trend"]
RecommendationPriority = Literal["high", "medium", "low"]
ImpactArea = Literal["process", "documentation", "communication", "resource"]

DEFAULT_SUMMARY = "Analysis complete."
DEFAULT_OUTCOME = "Unknown"
DEFAULT_PROCESSING_DAYS = 14
DEFAULT_PREDICTION_CONFIDENCE = 0.5


class CamelModel(BaseModel):
    """Serializes with camelCase keys and accepts either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Insight(CamelModel):
    """A short analytical statement about claims-processing data."""

    insight: str
    confidence_score: float = Field(ge=0.0, le=1.0)
    category: InsightCategory


class Recommendation(CamelModel):
    """An actionable suggestion for the claims workflow."""

    recommendation: str
    priority: RecommendationPriority
    impact_area: ImpactArea
    estimated_impact: str


class AnalysisResult(CamelModel):
    """Result of a claim insights generation."""

    insights: list[Insight] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    summary_text: str = Field(min_length=1)
    processing_duration: int = Field(default=0, ge=0)  # milliseconds
    diagnostic: Optional[str] = None


class OutcomePrediction(CamelModel):
    """Predicted resolution of a new claim."""

    likely_outcome: str
    estimated_processing_days: int = Field(ge=0)
    confidence_score: float = Field(ge=0.0, le=1.0)
    potential_issues: list[str] = Field(default_factory=list)
    recommended_actions: list[str] = Field(default_factory=list)
    diagnostic: Optional[str] = None


# ===== LLM response payloads =====
#
# Absent or null keys fall back to defaults; present keys with the wrong
# type or an out-of-range value fail validation.


class InsightsPayload(CamelModel):
    """Structured object returned by the model for claim insights."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    insights: list[Insight] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    summary_text: str = DEFAULT_SUMMARY

    @field_validator("insights", "recommendations", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("summary_text", mode="before")
    @classmethod
    def _blank_summary(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_SUMMARY
        return value


class PredictionPayload(CamelModel):
    """Structured object returned by the model for outcome prediction."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    likely_outcome: str = DEFAULT_OUTCOME
    estimated_processing_days: int = Field(default=DEFAULT_PROCESSING_DAYS, ge=0)
    confidence_score: float = Field(
        default=DEFAULT_PREDICTION_CONFIDENCE, ge=0.0, le=1.0
    )
    potential_issues: list[str] = Field(default_factory=list)
    recommended_actions: list[str] = Field(default_factory=list)

    @field_validator("likely_outcome", mode="before")
    @classmethod
    def _blank_outcome(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_OUTCOME
        return value

    @field_validator("estimated_processing_days", mode="before")
    @classmethod
    def _null_days(cls, value: Any) -> Any:
        return DEFAULT_PROCESSING_DAYS if value is None else value

    @field_validator("confidence_score", mode="before")
    @classmethod
    def _null_confidence(cls, value: Any) -> Any:
        return DEFAULT_PREDICTION_CONFIDENCE if value is None else value

    @field_validator("potential_issues", "recommended_actions", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value
