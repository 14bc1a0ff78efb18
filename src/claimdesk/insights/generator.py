"""AI insights generator for claims processing data."""

import asyncio
import json
import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from claimdesk.config import Settings, settings as default_settings
from claimdesk.exceptions import (
    InsightsTimeoutError,
    MissingAPIKeyError,
    ResponseParseError,
)
from claimdesk.insights.models import (
    AnalysisResult,
    Insight,
    InsightsPayload,
    OutcomePrediction,
    PredictionPayload,
    Recommendation,
)
from claimdesk.insights.prompts import (
    INSIGHTS_PROMPT,
    INSIGHTS_SYSTEM_PROMPT,
    PREDICTION_PROMPT,
    PREDICTION_SYSTEM_PROMPT,
)
from claimdesk.llm_logger import LLMLogger, llm_logger as default_llm_logger
from claimdesk.models.summaries import ActivitySummary, ClaimSummary, TaskSummary
from claimdesk.providers import LLMProvider, provider_from_settings

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

FALLBACK_SUMMARY = (
    "AI analysis service is currently unavailable. "
    "Please check your OpenAI API key configuration."
)


class InsightsGenerator:
    """Generates claim-processing insights and outcome predictions with an LLM.

    Each call:
    1. Projects the supplied snapshots into compact JSON
    2. Sends one JSON-mode request to the injected provider, bounded by a deadline
    3. Validates the returned object, filling absent keys with defaults

    Any failure along the way yields a fixed fallback result instead of an
    exception. The generator holds no per-call state, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider],
        max_tokens: int = 2000,
        temperature: float = 0.3,
        timeout_seconds: Optional[float] = 60.0,
        provider_label: str = "openai",
        call_logger: Optional[LLMLogger] = None,
    ):
        """Initialize the insights generator.

        Args:
            provider: LLM provider, or None when no API key is configured
            max_tokens: Maximum tokens for each response
            temperature: Sampling temperature
            timeout_seconds: Deadline for a single LLM call (None disables it)
            provider_label: Provider name reported when no provider is configured
            call_logger: LLM interaction logger (defaults to the global one)
        """
        self.provider = provider
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds
        self.provider_label = provider.provider_name if provider else provider_label
        self.call_logger = call_logger or default_llm_logger

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "InsightsGenerator":
        """Build a generator from application settings."""
        config = config or default_settings
        return cls(
            provider=provider_from_settings(config),
            max_tokens=config.openai_max_tokens,
            temperature=config.insights_temperature,
            timeout_seconds=config.insights_timeout_seconds,
            provider_label=config.llm_provider,
        )

    async def generate_claim_insights(
        self,
        claims: Sequence[ClaimSummary],
        tasks: Sequence[TaskSummary],
        activities: Sequence[ActivitySummary],
    ) -> AnalysisResult:
        """Generate insights, recommendations and a summary for claims data.

        Args:
            claims: Current claims (may be empty)
            tasks: Tasks related to the claims (may be empty)
            activities: Activities recorded on the claims (may be empty)

        Returns:
            AnalysisResult; the fixed fallback result if generation fails
        """
        start_time = time.monotonic()

        try:
            prompt = INSIGHTS_PROMPT.format(
                claims=_dumps([claim.projection() for claim in claims]),
                tasks=_dumps([task.projection() for task in tasks]),
                activities=_dumps([activity.projection() for activity in activities]),
            )

            logger.info(
                f"Generating claim insights for {len(claims)} claims, "
                f"{len(tasks)} tasks, {len(activities)} activities"
            )

            payload = await self._request_structured(
                operation="generate_claim_insights",
                system_prompt=INSIGHTS_SYSTEM_PROMPT,
                user_prompt=prompt,
                schema=InsightsPayload,
            )

            result = AnalysisResult(
                insights=payload.insights,
                recommendations=payload.recommendations,
                summary_text=payload.summary_text,
                processing_duration=_elapsed_ms(start_time),
            )

            logger.info(
                f"Claim insights generated: {len(result.insights)} insights, "
                f"{len(result.recommendations)} recommendations "
                f"in {result.processing_duration}ms"
            )
            return result

        except Exception as e:
            logger.error(f"Failed to generate claim insights: {e}")
            return self._fallback_analysis(
                processing_duration=_elapsed_ms(start_time),
                diagnostic=_diagnostic(e),
            )

    async def predict_claim_outcome(
        self,
        historical_claims: Sequence[ClaimSummary],
        new_claim: Mapping[str, Any],
    ) -> OutcomePrediction:
        """Predict how a new claim will resolve.

        Historical claims are only context for the model; nothing is fit
        locally and nothing is stored.

        Args:
            historical_claims: Existing claims used as context
            new_claim: Unvalidated key-value data describing the new claim

        Returns:
            OutcomePrediction; the fixed fallback prediction if prediction fails
        """
        try:
            prompt = PREDICTION_PROMPT.format(
                historical_claims=_dumps(
                    [claim.history_projection() for claim in historical_claims]
                ),
                new_claim=_dumps(dict(new_claim)),
            )

            logger.info(
                f"Predicting claim outcome using {len(historical_claims)} "
                "historical claims"
            )

            payload = await self._request_structured(
                operation="predict_claim_outcome",
                system_prompt=PREDICTION_SYSTEM_PROMPT,
                user_prompt=prompt,
                schema=PredictionPayload,
            )

            return OutcomePrediction(
                likely_outcome=payload.likely_outcome,
                estimated_processing_days=payload.estimated_processing_days,
                confidence_score=payload.confidence_score,
                potential_issues=payload.potential_issues,
                recommended_actions=payload.recommended_actions,
            )

        except Exception as e:
            logger.error(f"Failed to predict claim outcome: {e}")
            return self._fallback_prediction(diagnostic=_diagnostic(e))

    async def _request_structured(
        self,
        operation: str,
        system_prompt: str,
        user_prompt: str,
        schema: type[PayloadT],
    ) -> PayloadT:
        """Run one JSON-mode completion and validate it against a schema.

        Raises:
            MissingAPIKeyError: No provider is configured
            InsightsTimeoutError: The call exceeded the deadline
            ResponseParseError: The response is empty, not JSON, or invalid
        """
        if self.provider is None:
            raise MissingAPIKeyError(self.provider_label)

        request_id = self.call_logger.log_request(
            operation=operation,
            model=self.provider.model_name,
            prompt=user_prompt,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

        completion = self.provider.complete(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            json_schema=schema.model_json_schema(by_alias=True),
        )

        try:
            if self.timeout_seconds is None:
                response = await completion
            else:
                response = await asyncio.wait_for(
                    completion, timeout=self.timeout_seconds
                )
        except asyncio.TimeoutError as e:
            self.call_logger.log_error(request_id, e)
            raise InsightsTimeoutError(operation, self.timeout_seconds or 0.0) from e
        except Exception as e:
            self.call_logger.log_error(request_id, e)
            raise

        self.call_logger.log_response(
            request_id,
            response,
            cost_usd=self.provider.calculate_cost(
                response.prompt_tokens, response.completion_tokens
            ),
        )
        logger.debug(f"LLM {operation} took {response.duration_ms:.0f}ms")

        content = response.content.strip()
        if not content:
            raise ResponseParseError("Empty response from LLM")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ResponseParseError(
                f"LLM response is not valid JSON: {e}", raw_response=content
            ) from e

        if not isinstance(data, dict):
            raise ResponseParseError(
                f"Expected a JSON object, got {type(data).__name__}",
                raw_response=content,
            )

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ResponseParseError(
                f"LLM response does not match expected structure "
                f"({e.error_count()} errors)",
                raw_response=content,
            ) from e

    def _fallback_analysis(
        self, processing_duration: int, diagnostic: Optional[str] = None
    ) -> AnalysisResult:
        """Return the fixed result used whenever insight generation fails."""
        return AnalysisResult(
            insights=[
                Insight(
                    insight="Unable to generate AI insights at this time.",
                    confidence_score=0,
                    category="efficiency",
                )
            ],
            recommendations=[
                Recommendation(
                    recommendation="Check system configuration for AI analysis.",
                    priority="high",
                    impact_area="process",
                    estimated_impact="Will enable AI-powered insights",
                )
            ],
            summary_text=FALLBACK_SUMMARY,
            processing_duration=processing_duration,
            diagnostic=diagnostic,
        )

    def _fallback_prediction(self, diagnostic: Optional[str] = None) -> OutcomePrediction:
        """Return the fixed prediction used whenever outcome prediction fails."""
        return OutcomePrediction(
            likely_outcome="Unable to predict at this time",
            estimated_processing_days=14,
            confidence_score=0,
            potential_issues=["AI prediction service unavailable"],
            recommended_actions=["Submit claim with complete documentation"],
            diagnostic=diagnostic,
        )


def _dumps(data: Any) -> str:
    return json.dumps(data, default=str)


def _elapsed_ms(start_time: float) -> int:
    return max(0, int((time.monotonic() - start_time) * 1000))


def _diagnostic(error: Exception) -> str:
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__
