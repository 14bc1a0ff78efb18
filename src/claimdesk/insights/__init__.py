"""AI-powered insights for claims processing."""

from claimdesk.insights.generator import InsightsGenerator
from claimdesk.insights.models import (
    AnalysisResult,
    Insight,
    OutcomePrediction,
    Recommendation,
)

__all__ = [
    "AnalysisResult",
    "Insight",
    "InsightsGenerator",
    "OutcomePrediction",
    "Recommendation",
]
