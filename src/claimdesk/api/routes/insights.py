"""
Insights API routes.

Endpoints for AI analysis of the claims workload and outcome prediction
for new claims.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from claimdesk.api.dependencies import get_insights_generator
from claimdesk.api.schemas import PredictionRequest
from claimdesk.db.connection import get_db
from claimdesk.insights import AnalysisResult, InsightsGenerator, OutcomePrediction
from claimdesk.services.claims_service import load_snapshots

router = APIRouter()


@router.post("", response_model=AnalysisResult)
async def generate_insights(
    session: Session = Depends(get_db),
    generator: InsightsGenerator = Depends(get_insights_generator),
) -> AnalysisResult:
    """
    Analyze all stored claims, tasks and activities.

    **Returns:**
    - 3-5 insights (efficiency, risk, opportunity, trend) with confidence scores
    - 3 prioritized workflow recommendations
    - A summary paragraph

    Always responds 200. When the AI service is unavailable the body is the
    fixed fallback result and ``diagnostic`` says why.
    """
    claims, tasks, activities = load_snapshots(session)
    return await generator.generate_claim_insights(claims, tasks, activities)


@router.post("/predict", response_model=OutcomePrediction)
async def predict_outcome(
    payload: PredictionRequest,
    session: Session = Depends(get_db),
    generator: InsightsGenerator = Depends(get_insights_generator),
) -> OutcomePrediction:
    """
    Predict the outcome of a new claim using stored claims as history.

    The claim body is passed through to the model unvalidated; nothing is
    stored.
    """
    claims, _, _ = load_snapshots(session)
    return await generator.predict_claim_outcome(claims, payload.claim)
