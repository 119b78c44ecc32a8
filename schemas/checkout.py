# schemas/checkout.py
"""
Pydantic schemas for the checkout relay API.
"""
import math
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckoutRequest(BaseModel):
     """Request body for POST /create-checkout."""

     amount: Union[int, float] = Field(..., description="Amount in the smallest currency unit (e.g. cents)")
     metadata: Dict[str, Any] = Field(default_factory=dict, description="Opaque data forwarded to the provider")

     model_config = ConfigDict(
          extra="ignore",
          json_schema_extra={
               "example": {
                    "amount": 15000,
                    "metadata": {"bookingId": "bk_42", "eventName": "Sunrise Hike"},
               }
          },
     )

     @field_validator("amount", mode="before")
     @classmethod
     def _amount_must_be_numeric(cls, value: Any) -> Union[int, float]:
          if isinstance(value, bool) or value is None:
               raise ValueError("must be a number")
          if isinstance(value, str):
               text = value.strip()
               try:
                    value = int(text)
               except ValueError:
                    try:
                         value = float(text)
                    except ValueError:
                         raise ValueError("must be a number")
          if not isinstance(value, (int, float)):
               raise ValueError("must be a number")
          if isinstance(value, float) and not math.isfinite(value):
               raise ValueError("must be a number")
          return value

     @field_validator("metadata", mode="before")
     @classmethod
     def _metadata_default(cls, value: Any) -> Any:
          # explicit null behaves like an omitted field
          return {} if value is None else value
