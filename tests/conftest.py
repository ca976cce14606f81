# tests/conftest.py
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from creator_hub_api.app.main import create_app
from creator_hub_api.app.schemas.payment import PaymentIntent
from creator_hub_api.app.services.payment_service import StripeGateway, get_payment_gateway
from creator_hub_api.app.storage import MemStorage


class FakeStripeGateway(StripeGateway):
    """In-memory stand-in for Stripe's PaymentIntents API."""

    def __init__(self) -> None:
        super().__init__(secret_key="sk_test_fake")
        self.intents: Dict[str, PaymentIntent] = {}
        self.error: Optional[Exception] = None

    def add_intent(self, intent_id: str, status: str, user_id: int, customer: Optional[str] = None) -> PaymentIntent:
        intent = PaymentIntent(
            id=intent_id,
            status=status,
            client_secret=f"{intent_id}_secret",
            customer=customer,
            metadata={"userId": str(user_id), "subscriptionType": "premium"},
        )
        self.intents[intent_id] = intent
        return intent

    async def create_payment_intent(self, amount, currency, metadata):
        if self.error:
            raise self.error
        intent = PaymentIntent(
            id=f"pi_{len(self.intents) + 1}",
            status="requires_payment_method",
            client_secret=f"pi_{len(self.intents) + 1}_secret",
            metadata=metadata,
        )
        self.intents[intent.id] = intent
        return intent

    async def retrieve_payment_intent(self, intent_id):
        if self.error:
            raise self.error
        return self.intents[intent_id]


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def gateway():
    return FakeStripeGateway()


@pytest.fixture
def app(storage, gateway):
    application = create_app(storage=storage)
    application.dependency_overrides[get_payment_gateway] = lambda: gateway
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, username: str, password: str = "secret") -> dict:
    """Register a user and return ``{"headers": ..., "user": ...}``."""
    response = client.post("/api/v1/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    body = response.json()
    return {"headers": {"Authorization": f"Bearer {body['access_token']}"}, "user": body["user"]}


@pytest.fixture
def signup(client):
    return lambda username, password="secret": register(client, username, password)
