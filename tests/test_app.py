"""
Tests for application startup and shutdown wiring.
"""
from fastapi.testclient import TestClient

from config import Settings
from main import create_app, describe_validation_error
from services.checkout_relay import CheckoutRelay


def test_startup_builds_relay_from_settings():
    settings = Settings(
        frontend_url="https://tickets.example.co.za",
        payment_secret_key="sk_test_startup",
        database_url="sqlite://",
        store_failure_policy="log",
    )
    app = create_app(settings)

    with TestClient(app) as client:
        relay = app.state.relay
        assert isinstance(relay, CheckoutRelay)
        assert relay.store_failure_policy == "log"
        assert relay.http.headers["Authorization"] == "Bearer sk_test_startup"
        assert relay.store.get("checkouts", "missing") is None
        assert client.get("/").status_code == 200

    assert app.state.relay is None


def test_injected_relay_is_left_in_place(test_settings, relay):
    app = create_app(test_settings, relay=relay)

    with TestClient(app):
        assert app.state.relay is relay

    assert app.state.relay is relay


def test_describe_validation_error_falls_back_for_empty_errors():
    class NoErrors:
        def errors(self):
            return []

    assert describe_validation_error(NoErrors()) == "Invalid request body"
