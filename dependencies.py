# dependencies.py
from fastapi import Request

from services.checkout_relay import CheckoutRelay


def get_checkout_relay(request: Request) -> CheckoutRelay:
     """Relay built during startup (see main.lifespan)."""
     return request.app.state.relay
