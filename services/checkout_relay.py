# services/checkout_relay.py
"""
Checkout Relay - forwards checkout creation to the payment provider.

Flow for one request:
1. Build the provider payload (fixed currency, redirect URLs under the
   frontend base URL, caller metadata forwarded as-is).
2. POST it to the provider's checkout endpoint with the bearer secret.
3. Non-2xx: raise UpstreamError carrying the provider's status and body.
4. 2xx: parse the provider record and write it, plus a server timestamp,
   to the "checkouts" collection keyed by the record's id.

No retries, no idempotency keys. The caller decides how errors map to HTTP.
"""
import logging
from typing import Any, Dict, Optional

import requests

from services.document_store import SERVER_TIMESTAMP, DocumentStore

logger = logging.getLogger(__name__)

CURRENCY = "ZAR"
SUCCESS_PATH = "/payment-success"
CANCEL_PATH = "/payment-cancel"
FAILURE_PATH = "/payment-failure"
CHECKOUTS_COLLECTION = "checkouts"
CREATED_AT_FIELD = "createdAt"

STORE_FAILURE_ESCALATE = "escalate"
STORE_FAILURE_LOG = "log"


class UpstreamError(Exception):
     """The payment provider answered with a non-success status."""

     def __init__(self, status_code: int, body: bytes, content_type: Optional[str] = None):
          super().__init__(f"Payment provider returned {status_code}")
          self.status_code = status_code
          self.body = body
          self.content_type = content_type


def build_http_session(secret_key: str) -> requests.Session:
     """Long-lived provider session; carries auth headers on every request."""
     session = requests.Session()
     session.headers.update({
          "Content-Type": "application/json",
          "Authorization": f"Bearer {secret_key}",
     })
     return session


class CheckoutRelay:
     """Creates provider checkouts and records them in the document store."""

     def __init__(
          self,
          http: requests.Session,
          store: DocumentStore,
          checkout_api_url: str,
          frontend_url: str,
          store_failure_policy: str = STORE_FAILURE_ESCALATE,
     ):
          if store_failure_policy not in (STORE_FAILURE_ESCALATE, STORE_FAILURE_LOG):
               raise ValueError(f"Unknown store failure policy: {store_failure_policy}")
          self.http = http
          self.store = store
          self.checkout_api_url = checkout_api_url
          self.frontend_url = frontend_url.rstrip("/")
          self.store_failure_policy = store_failure_policy

     def build_payload(self, amount: Any, metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
          return {
               "amount": amount,
               "currency": CURRENCY,
               "successUrl": f"{self.frontend_url}{SUCCESS_PATH}",
               "cancelUrl": f"{self.frontend_url}{CANCEL_PATH}",
               "failureUrl": f"{self.frontend_url}{FAILURE_PATH}",
               "metadata": metadata if metadata is not None else {},
          }

     def create_checkout(self, amount: Any, metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
          """
          Create a checkout with the provider and record it.

          Returns:
               The provider's checkout record, unmodified.

          Raises:
               UpstreamError: Provider responded with a non-2xx status
               ValueError: Provider body is not a JSON object with an id
               requests.RequestException: Network failure talking to the provider
               Exception: Store write failure when the policy is "escalate"
          """
          payload = self.build_payload(amount, metadata)
          response = self.http.post(self.checkout_api_url, json=payload)

          if not 200 <= response.status_code < 300:
               logger.warning("Payment provider rejected checkout: status=%s", response.status_code)
               raise UpstreamError(
                    response.status_code,
                    response.content,
                    response.headers.get("Content-Type"),
               )

          record = response.json()
          if not isinstance(record, dict) or record.get("id") in (None, ""):
               raise ValueError("Payment provider response has no checkout id")

          logger.info("Checkout created: id=%s", record["id"])
          self._record(record)
          return record

     def _record(self, record: Dict[str, Any]) -> None:
          document = dict(record)
          document[CREATED_AT_FIELD] = SERVER_TIMESTAMP
          try:
               self.store.set(CHECKOUTS_COLLECTION, str(record["id"]), document)
          except Exception:
               if self.store_failure_policy == STORE_FAILURE_ESCALATE:
                    raise
               logger.exception("Failed to record checkout %s; returning provider record anyway", record["id"])
