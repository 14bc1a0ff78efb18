"""
Startup dependency checks for the ClaimDesk backend.

Validates critical dependencies before the application starts serving requests.
Fails fast with clear, actionable error messages when requirements aren't met.
A missing LLM API key is reported but never fatal: insights then return
their fallback results.
"""

import sys
import time
from typing import Optional

from sqlalchemy import text

from claimdesk.config import settings
from claimdesk.db.connection import SessionLocal, init_db


class StartupCheckError(Exception):
    """Raised when a critical startup check fails."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        error_msg = f"\n{'='*70}\n❌ STARTUP CHECK FAILED\n{'='*70}\n\n{self.message}\n"
        if self.hint:
            error_msg += f"\n💡 Hint: {self.hint}\n"
        error_msg += f"{'='*70}\n"
        return error_msg


def check_database_connection() -> None:
    """
    Verify the database is accessible and responsive.

    Raises:
        StartupCheckError: If database connection fails
    """
    try:
        with SessionLocal() as session:
            result = session.execute(text("SELECT 1")).scalar()
            if result != 1:
                raise StartupCheckError(
                    "Database query returned unexpected result",
                    "Database may be corrupted or misconfigured",
                )
    except StartupCheckError:
        raise
    except Exception as e:
        error_str = str(e).lower()

        if "could not connect" in error_str or "connection refused" in error_str:
            hint = (
                "PostgreSQL is not running.\n"
                "  - Start with Docker: docker-compose up -d\n"
                "  - Or set DATABASE_URL=sqlite:///claimdesk.db for local use"
            )
        elif "authentication failed" in error_str or "password" in error_str:
            hint = (
                "Database authentication failed.\n"
                "  - Check credentials in .env file\n"
                f"  - Current user: {settings.postgres_user}\n"
                f"  - Current database: {settings.postgres_db}"
            )
        elif "timeout" in error_str or "timed out" in error_str:
            hint = (
                "Database connection timed out.\n"
                f"  - Current host: {settings.postgres_host}:{settings.postgres_port}"
            )
        else:
            hint = f"Check your database configuration in .env\nError: {str(e)}"

        raise StartupCheckError("Cannot connect to the claims database", hint) from e


def check_database_schema() -> None:
    """
    Create any missing tables.

    Raises:
        StartupCheckError: If the schema cannot be created
    """
    try:
        init_db()
    except Exception as e:
        raise StartupCheckError(
            f"Failed to create database tables: {str(e)}",
            "Verify the database user can create tables",
        ) from e


def check_llm_configuration() -> Optional[str]:
    """
    Report whether an LLM API key is configured.

    Never raises: without a key the insights endpoints serve fallback results.

    Returns:
        Warning message if no key is configured, otherwise None
    """
    if not settings.llm_api_key:
        return (
            f"{settings.llm_provider} API key not configured - "
            "AI insights will return fallback results"
        )
    return None


def run_all_startup_checks() -> None:
    """
    Execute all startup dependency checks.

    Runs checks in order of dependency:
    1. Database connection
    2. Database schema
    3. LLM configuration (warning only)

    Raises:
        SystemExit: If a critical check fails
    """
    startup_start = time.time()

    checks = [
        ("Database Connection", check_database_connection),
        ("Database Schema", check_database_schema),
    ]

    print("\n" + "=" * 70)
    print("🚀 Starting ClaimDesk Backend - Running Startup Checks")
    print("=" * 70 + "\n")

    for check_name, check_func in checks:
        print(f"  Checking {check_name}...", end=" ", flush=True)
        check_start = time.time()
        try:
            check_func()
        except StartupCheckError as e:
            print(f"❌ FAIL ({(time.time() - check_start) * 1000:.1f}ms)")
            print(str(e))
            sys.exit(1)
        print(f"✅ PASS ({(time.time() - check_start) * 1000:.1f}ms)")

    print("  Checking LLM Configuration...", end=" ", flush=True)
    warning = check_llm_configuration()
    if warning:
        print(f"⚠️  SKIP ({warning})")
    else:
        print(f"✅ PASS ({settings.llm_provider}: {settings.llm_model})")

    total_ms = (time.time() - startup_start) * 1000
    print("\n" + "=" * 70)
    print(f"✅ All startup checks passed - Server is ready ({total_ms:.1f}ms)")
    print("=" * 70 + "\n")
