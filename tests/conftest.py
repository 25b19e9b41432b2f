import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from core.config import Settings
from core.mail import Mailer, get_mailer
from database import build_engine, create_db_and_tables
from main import create_app

MAILBOX = "inbox@contact-relay.dev"


class RecordingMailer(Mailer):
    """Keeps notifications in memory instead of handing them to the relay."""

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.sent = []

    async def send_notification(self, subject: str, body: str):
        self.sent.append({"to": self.mailbox, "subject": subject, "body": body})


class FailingMailer(RecordingMailer):
    async def send_notification(self, subject: str, body: str):
        raise ConnectionRefusedError("relay unreachable")


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        MAIL_USERNAME=MAILBOX,
        MAIL_PASSWORD="secret",
        MAIL_SERVER="smtp.contact-relay.dev",
    )


@pytest.fixture
def engine(settings):
    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def mailer(settings):
    return RecordingMailer(settings)


@pytest.fixture
def app(settings, engine, mailer):
    app = create_app(settings, engine=engine)
    app.dependency_overrides[get_mailer] = lambda: mailer
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
