"""
Pydantic models for the premium subscription flow.

The client first asks for a payment intent, confirms it with Stripe
on its side, and then posts the intent id back to ``/subscribe``.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class PaymentIntentRead(BaseModel):
    client_secret: str


class SubscribeRequest(BaseModel):
    payment_intent_id: str = Field(..., min_length=1, examples=["pi_3N..."])


class PaymentIntent(BaseModel):
    """Subset of a Stripe PaymentIntent object used by the service."""

    id: str
    status: str
    client_secret: Optional[str] = None
    customer: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
