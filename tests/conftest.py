"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real database. Tables are created before each test and dropped
after it, so every test starts from an empty ledger.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bankapp.main import app
from bankapp.models import Base
from bankapp.models.base import get_db
from bankapp.services.account_service import AccountService
from bankapp.services.notification_service import (
    NotificationChannel,
    NotificationGateway,
    get_notification_gateway,
)


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class RecordingChannel(NotificationChannel):
    """Channel that remembers every message instead of delivering it."""

    def __init__(self, name: str, delivered: bool = True):
        self._name = name
        self.delivered = delivered
        self.sent = []

    @property
    def name(self) -> str:
        return self._name

    def send(self, from_label, to_label, subject, body):
        self.sent.append((from_label, to_label, subject, body))
        return self.delivered


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def email_channel():
    return RecordingChannel("email")


@pytest.fixture
def sms_channel():
    return RecordingChannel("sms")


@pytest.fixture
def notifications(email_channel, sms_channel):
    return NotificationGateway(
        channels=[email_channel, sms_channel],
        default_channel="email",
    )


@pytest.fixture
def service(db_session, notifications):
    return AccountService(db_session, notifications)


@pytest.fixture
def client(db_session, notifications):
    """
    Provide a test client wired to the test database.

    get_db and the notification gateway are overridden so the
    app uses the test session and the recording channels.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notification_gateway] = lambda: notifications
    yield TestClient(app)
    app.dependency_overrides.clear()
