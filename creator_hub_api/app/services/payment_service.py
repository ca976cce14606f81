"""
Business logic for premium subscriptions.

The flow has two steps.  ``create_premium_intent`` asks Stripe for a
PaymentIntent for the premium price and hands its client secret to
the frontend, which collects the card details.  Once Stripe reports
the payment, the client calls ``confirm_subscription`` with the intent
id; the intent is re‑read from Stripe, checked, and the user is marked
premium.

Stripe is reached over its REST API with ``httpx``.  Network errors
and non‑2xx responses propagate as ``httpx.HTTPError``.
"""

import logging
from typing import Dict, Optional

import httpx

from ..core.config import settings
from ..schemas.payment import PaymentIntent
from ..schemas.user import User
from ..storage import Storage

SUBSCRIPTION_TYPE = "premium"


class StripeGateway:
    """Minimal client for the PaymentIntents endpoints of the Stripe API."""

    def __init__(
        self,
        secret_key: str,
        api_base: str = "https://api.stripe.com/v1",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ) -> None:
        self.secret_key = secret_key
        self.api_base = api_base.rstrip("/")
        self._transport = transport
        self._timeout = timeout

    async def _request(self, method: str, path: str, data: Optional[Dict[str, str]] = None) -> dict:
        if not self.secret_key:
            raise RuntimeError("STRIPE_SECRET_KEY is not configured")
        async with httpx.AsyncClient(
            base_url=self.api_base,
            auth=(self.secret_key, ""),
            transport=self._transport,
            timeout=self._timeout,
        ) as client:
            response = await client.request(method, path, data=data)
        response.raise_for_status()
        return response.json()

    async def create_payment_intent(self, amount: int, currency: str, metadata: Dict[str, str]) -> PaymentIntent:
        # Stripe expects nested fields in bracket notation for form bodies.
        form = {"amount": str(amount), "currency": currency}
        form.update({f"metadata[{key}]": value for key, value in metadata.items()})
        return PaymentIntent.model_validate(await self._request("POST", "/payment_intents", form))

    async def retrieve_payment_intent(self, intent_id: str) -> PaymentIntent:
        return PaymentIntent.model_validate(await self._request("GET", f"/payment_intents/{intent_id}"))


def get_payment_gateway() -> StripeGateway:
    """FastAPI dependency building a gateway from settings."""
    return StripeGateway(settings.stripe_secret_key, settings.stripe_api_base)


class PaymentService:
    """Premium subscription purchase and confirmation."""

    @classmethod
    async def create_premium_intent(cls, gateway: StripeGateway, user: User) -> str:
        """Create a PaymentIntent for the premium plan and return its client secret."""
        intent = await gateway.create_payment_intent(
            amount=settings.premium_price_cents,
            currency=settings.premium_currency,
            metadata={"userId": str(user.id), "subscriptionType": SUBSCRIPTION_TYPE},
        )
        logging.getLogger(__name__).info("Created payment intent %s for user %s", intent.id, user.id)
        if not intent.client_secret:
            raise RuntimeError(f"Payment intent {intent.id} has no client secret")
        return intent.client_secret

    @classmethod
    async def confirm_subscription(
        cls,
        storage: Storage,
        gateway: StripeGateway,
        user: User,
        payment_intent_id: str,
    ) -> Optional[User]:
        """Mark ``user`` premium once their payment has succeeded.

        Returns the updated user, or ``None`` if the user vanished
        meanwhile.

        Raises
        ------
        ValueError
            If the payment has not succeeded.
        PermissionError
            If the payment intent was created for another user.
        """
        logger = logging.getLogger(__name__)
        intent = await gateway.retrieve_payment_intent(payment_intent_id)
        if intent.status != "succeeded":
            logger.info("Payment intent %s not successful (%s)", intent.id, intent.status)
            raise ValueError("Payment not successful")
        if intent.metadata.get("userId") != str(user.id):
            logger.warning("User %s tried to redeem payment intent %s of another user", user.id, intent.id)
            raise PermissionError("Payment intent does not match user")
        updated = await storage.update_user(
            user.id,
            {"is_premium": True, "stripe_customer_id": intent.customer or None},
        )
        if updated is not None:
            logger.info("User %s upgraded to premium", user.id)
        return updated
