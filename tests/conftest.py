"""
Pytest configuration and fixtures for ClaimDesk tests.

This module provides shared fixtures for testing database models,
repositories, API routes and the insights generator.
"""

import os

# Keep the module-level engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import asyncio
import json
from datetime import date, datetime, timedelta, timezone
from typing import Any, Generator, Optional
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from claimdesk.models.db import (
    Activity,
    ActivityType,
    Base,
    Claim,
    ClaimStatus,
    ClaimType,
    Document,
    Task,
    TaskStatus,
)
from claimdesk.providers.base import LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """In-memory LLM provider returning canned content and recording calls."""

    def __init__(
        self,
        content: str = "{}",
        error: Optional[BaseException] = None,
        delay: float = 0.0,
        model: str = "fake-model",
    ):
        self.content = content
        self.error = error
        self.delay = delay
        self._model = model
        self.calls: list[dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def model_name(self) -> str:
        return self._model

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 2000,
        temperature: float = 0.3,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "json_schema": json_schema,
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content,
            prompt_tokens=100,
            completion_tokens=50,
            total_tokens=150,
            finish_reason="stop",
            model=self._model,
            duration_ms=12.5,
        )

    def calculate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        return 0.0


@pytest.fixture
def fake_provider_factory():
    """Build FakeProvider instances; JSON-serializes dict content."""

    def _factory(content: Any = None, **kwargs: Any) -> FakeProvider:
        if content is None:
            content = {}
        if not isinstance(content, str):
            content = json.dumps(content)
        return FakeProvider(content=content, **kwargs)

    return _factory


@pytest.fixture
def silent_call_logger() -> Mock:
    """LLM call logger stand-in that records calls without writing anything."""
    call_logger = Mock()
    call_logger.log_request.return_value = "test_request"
    return call_logger


@pytest.fixture(scope="session")
def test_engine():
    """Create a test database engine using SQLite in-memory."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={
            "check_same_thread": False
        },  # Allow cross-thread access for TestClient
    )

    # pysqlite does not emit BEGIN itself; let SQLAlchemy manage transactions
    # so the per-test SAVEPOINTs work.
    @event.listens_for(engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine) -> Generator[Session, None, None]:
    """
    Create a new database session for a test.

    Each test gets a fresh session with a transaction that is rolled back
    after the test completes, ensuring test isolation.
    """
    connection = test_engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, join_transaction_mode="create_savepoint")()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def api_client(db_session: Session):
    """Create a test client for FastAPI with database dependency override."""
    from unittest.mock import patch

    from fastapi.testclient import TestClient

    from claimdesk.api.app import app
    from claimdesk.api.dependencies import get_insights_generator
    from claimdesk.db.connection import get_db
    from claimdesk.insights import InsightsGenerator

    def override_get_db():
        try:
            yield db_session
            db_session.commit()
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    # No provider unless a test installs one
    app.dependency_overrides[get_insights_generator] = lambda: InsightsGenerator(
        provider=None, call_logger=Mock()
    )

    # Disable lifespan startup checks for testing
    with patch("claimdesk.api.app.run_all_startup_checks"):
        client = TestClient(app)
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_claim(db_session: Session) -> Claim:
    """Create a sample claim waiting on documents."""
    claim = Claim(
        claim_number="CLM-20001",
        company_name="Acme Logistics Inc.",
        contact_person="John Smith",
        email="john.smith@acmelogistics.com",
        phone="(555) 123-4567",
        claim_amount="$1,250.00",
        claim_type=ClaimType.DAMAGE.value,
        claim_description="Pallet crushed in transit",
        status=ClaimStatus.MISSING_INFO.value,
        assigned_to="Sarah Johnson",
        missing_information=["Pro Number", "Photos of damaged items"],
        date_submitted=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    )
    db_session.add(claim)
    db_session.commit()
    db_session.refresh(claim)
    return claim


@pytest.fixture
def completed_claim(db_session: Session) -> Claim:
    """Create a sample completed claim."""
    claim = Claim(
        claim_number="CLM-20002",
        company_name="Metro Distribution",
        contact_person="Robert Chen",
        email="robert.chen@metrodist.com",
        phone="(555) 456-7890",
        claim_amount="$1,750.00",
        claim_type=ClaimType.SHORTAGE.value,
        status=ClaimStatus.COMPLETED.value,
        assigned_to="Jessica Williams",
        missing_information=[],
        date_submitted=datetime(2024, 2, 1, 9, 0, tzinfo=timezone.utc),
        completion_date=datetime(2024, 2, 15, 17, 0, tzinfo=timezone.utc),
    )
    db_session.add(claim)
    db_session.commit()
    db_session.refresh(claim)
    return claim


@pytest.fixture
def sample_task(db_session: Session, sample_claim: Claim) -> Task:
    """Create a pending task due tomorrow."""
    task = Task(
        claim_id=sample_claim.id,
        title="Follow up on missing documentation",
        description="Request photos and the pro number",
        due_date=date.today() + timedelta(days=1),
        status=TaskStatus.PENDING.value,
        assigned_to="Sarah Johnson",
    )
    db_session.add(task)
    db_session.commit()
    db_session.refresh(task)
    return task


@pytest.fixture
def overdue_task(db_session: Session, sample_claim: Claim) -> Task:
    """Create an in-progress task that is past due."""
    task = Task(
        claim_id=sample_claim.id,
        title="Call consignee",
        description="Confirm delivery exceptions",
        due_date=date.today() - timedelta(days=3),
        status=TaskStatus.IN_PROGRESS.value,
        assigned_to="Sarah Johnson",
    )
    db_session.add(task)
    db_session.commit()
    db_session.refresh(task)
    return task


@pytest.fixture
def sample_activity(db_session: Session, sample_claim: Claim) -> Activity:
    """Create a sample email activity."""
    activity = Activity(
        claim_id=sample_claim.id,
        type=ActivityType.EMAIL.value,
        description="Email Sent: Missing Information Request",
        timestamp=datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc),
        created_by="Sarah Johnson",
        extra_data={"details": "Requested photos"},
    )
    db_session.add(activity)
    db_session.commit()
    db_session.refresh(activity)
    return activity


@pytest.fixture
def sample_document(db_session: Session, sample_claim: Claim) -> Document:
    """Create a delivery receipt filed for the sample claim."""
    document = Document(
        claim_id=sample_claim.id,
        file_name="delivery_receipt.pdf",
        file_type="application/pdf",
        file_path="uploads/1717243200000-delivery_receipt.pdf",
        uploaded_at=datetime(2024, 3, 3, 14, 0, tzinfo=timezone.utc),
        uploaded_by="Sarah Johnson",
    )
    db_session.add(document)
    db_session.commit()
    db_session.refresh(document)
    return document
