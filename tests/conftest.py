"""
Pytest configuration and fixtures.
"""
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from config import Settings
from database import build_engine, build_session_factory, init_db
from main import create_app
from services.checkout_relay import CheckoutRelay
from services.document_store import DocumentStore
from tests.fakes import FakeResponse


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        frontend_url="https://tickets.example.co.za/",
        payment_secret_key="sk_test_fake_key_for_testing",
        checkout_api_url="https://payments.example.test/api/checkouts",
        database_url="sqlite://",
        log_level="DEBUG",
    )


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> DocumentStore:
    return DocumentStore(build_session_factory(engine))


@pytest.fixture
def http():
    session = MagicMock(spec=requests.Session)
    session.post.return_value = FakeResponse(200, {"id": "chk_default", "amount": 100})
    return session


@pytest.fixture
def relay(http, store, test_settings) -> CheckoutRelay:
    return CheckoutRelay(
        http=http,
        store=store,
        checkout_api_url=test_settings.checkout_api_url,
        frontend_url=test_settings.frontend_url,
        store_failure_policy=test_settings.store_failure_policy,
    )


@pytest.fixture
def client(test_settings, relay):
    app = create_app(test_settings, relay=relay)
    with TestClient(app) as c:
        yield c
