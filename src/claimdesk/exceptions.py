"""Custom exceptions for ClaimDesk."""


class ClaimDeskError(Exception):
    """Base exception for all ClaimDesk errors."""


class InsightsServiceError(ClaimDeskError):
    """Raised when the AI insights service cannot produce a result.

    Never escapes the insights generator; it is converted to a fallback
    result at the operation boundary.
    """


class MissingAPIKeyError(InsightsServiceError):
    """Raised when no LLM API key is configured."""

    def __init__(self, provider: str = "openai"):
        self.provider = provider
        super().__init__(f"{provider} API key is not configured")


class InsightsTimeoutError(InsightsServiceError):
    """Raised when the LLM call exceeds its deadline."""

    def __init__(self, operation: str, timeout_seconds: float):
        self.operation = operation
        self.timeout_seconds = timeout_seconds
        super().__init__(f"{operation} timed out after {timeout_seconds:.1f}s")


class ResponseParseError(InsightsServiceError):
    """LLM response could not be parsed into the expected structure."""

    def __init__(self, message: str, raw_response: str = ""):
        self.raw_response = raw_response
        super().__init__(message)


class NotFoundError(ClaimDeskError):
    """Raised when a requested record does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
