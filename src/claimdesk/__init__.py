"""ClaimDesk - trucking claims management with AI processing insights."""

__version__ = "0.1.0"
