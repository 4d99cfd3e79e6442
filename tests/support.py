"""Shared test helpers: in-memory report store and a TestClient wired to it."""

from collections.abc import Generator
from datetime import UTC, datetime

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.v1.webhook import get_intake_service
from app.core.config import get_settings
from app.core.database import get_db
from app.main import app
from app.models import Base, SecurityReport
from app.services.intake import IntakeService

TEST_API_KEY = "test-webhook-key"


def make_session_factory() -> sessionmaker:
    """
    Fresh in-memory SQLite database with the schema created.

    StaticPool keeps one connection so every session (and the TestClient's
    worker threads) sees the same in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_client(
    session_factory: sessionmaker,
    api_key: str | None = TEST_API_KEY,
    strict_transitions: bool = False,
) -> TestClient:
    """Return a TestClient whose DB, webhook secret and settings are test-controlled."""

    def override_get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    test_settings = get_settings().model_copy(
        update={"STRICT_STATUS_TRANSITIONS": strict_transitions}
    )
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_intake_service] = lambda: IntakeService(api_key)
    app.dependency_overrides[get_settings] = lambda: test_settings
    return TestClient(app)


def clear_overrides() -> None:
    app.dependency_overrides.clear()


def add_report(
    db: Session,
    severity: str = "high",
    status: str = "new",
    created_at: datetime | None = None,
    **kwargs: object,
) -> SecurityReport:
    """Insert a report row directly, bypassing intake."""
    defaults = {
        "source": "npm-audit",
        "title": "Prototype Pollution in lodash",
        "summary": "Update to lodash@4.17.21.",
        "raw_data": "{}",
    }
    defaults.update(kwargs)
    row = SecurityReport(severity=severity, status=status, **defaults)
    if created_at is not None:
        row.created_at = created_at
        row.updated_at = created_at
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def at(hour: int) -> datetime:
    """Fixed timestamp on a reference day, for ordering tests."""
    return datetime(2026, 1, 1, hour, 0, 0, tzinfo=UTC)
