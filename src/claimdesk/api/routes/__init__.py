"""
API routes for ClaimDesk.
"""

from claimdesk.api.routes import activities, claims, documents, insights, stats, tasks

__all__ = [
    "activities",
    "claims",
    "documents",
    "insights",
    "stats",
    "tasks",
]
