"""FastAPI dependencies shared across routes."""

from functools import lru_cache

from claimdesk.insights import InsightsGenerator


@lru_cache(maxsize=1)
def get_insights_generator() -> InsightsGenerator:
    """Return the process-wide insights generator built from settings."""
    return InsightsGenerator.from_settings()
