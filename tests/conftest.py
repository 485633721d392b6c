import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("SQL_ECHO", "false")
os.environ.setdefault("AUTO_CREATE_DB", "false")
os.environ.setdefault("EMAIL_BACKEND", "disabled")
os.environ.setdefault("RESET_PASSWORD_TOKEN_EXPIRES_IN", "30")

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import ewallet.models  # noqa: F401
from ewallet.core.errors import MailDeliveryError
from ewallet.core.rate_limit import limiter
from ewallet.core.security import BCryptHashProvider, JWTSigningProvider

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

limiter.enabled = False


class FakeMailProvider:
    """Guarda los emails en memoria en lugar de enviarlos"""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send_email(self, envelope) -> None:
        if self.fail:
            raise MailDeliveryError()
        self.sent.append(envelope)

    def last_reset_token(self) -> str:
        text = self.sent[-1].text_content
        return text.split("token=", 1)[1].split()[0]


@pytest.fixture()
def engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture()
def db_session(engine):
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture()
def hash_provider():
    # Pocas rondas para que los tests sean rápidos
    return BCryptHashProvider(rounds=4)


@pytest.fixture()
def signing_provider():
    return JWTSigningProvider("test-secret-key", 60)


@pytest.fixture()
def mail_provider():
    return FakeMailProvider()


@pytest.fixture()
def auth_service(db_session, hash_provider, signing_provider, mail_provider):
    from ewallet.services.auth import AuthService

    return AuthService(db_session, hash_provider, signing_provider, mail_provider)


@pytest.fixture()
def client(engine, db_session, hash_provider, signing_provider, mail_provider):
    from ewallet.main import app
    from ewallet.core.database import get_session
    from ewallet.core.security import get_hash_provider, get_signing_provider
    from ewallet.services.email_service import get_mail_provider

    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_hash_provider] = lambda: hash_provider
    app.dependency_overrides[get_signing_provider] = lambda: signing_provider
    app.dependency_overrides[get_mail_provider] = lambda: mail_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
