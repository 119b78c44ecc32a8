# routers/checkout.py
"""
Checkout creation API.

POST /create-checkout: create a payment-provider checkout for an amount and
relay the provider's record back to the caller.
Provider errors are passed through with the provider's status, raw body
bytes and content type; anything else that goes wrong becomes a 500 with
the exception text.
"""
import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from dependencies import get_checkout_relay
from schemas.checkout import CheckoutRequest
from services.checkout_relay import CheckoutRelay, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["checkout"])


@router.post("/create-checkout", summary="Create checkout session")
def create_checkout(
     body: CheckoutRequest,
     relay: CheckoutRelay = Depends(get_checkout_relay),
):
     logger.info("Checkout requested: amount=%s", body.amount)
     try:
          record = relay.create_checkout(body.amount, body.metadata)
          # rendering can still fail (e.g. NaN in the provider record)
          return JSONResponse(status_code=200, content=record)
     except UpstreamError as e:
          return Response(
               content=e.body,
               status_code=e.status_code,
               media_type=e.content_type or "text/plain",
          )
     except Exception as e:
          logger.exception("Checkout creation failed")
          return JSONResponse(
               status_code=500,
               content={"error": "Failed to create checkout", "details": str(e)},
          )
