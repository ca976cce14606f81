"""
Payment endpoints for API v1.

``create-payment-intent`` starts a premium purchase and returns the
Stripe client secret; ``subscribe`` finishes it once the payment has
gone through.  Gateway failures surface as 500 responses carrying
the gateway's error message.
"""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import get_current_user
from creator_hub_api.app.schemas.payment import PaymentIntentRead, SubscribeRequest
from creator_hub_api.app.schemas.user import User, UserRead
from creator_hub_api.app.services.payment_service import PaymentService, StripeGateway, get_payment_gateway
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/create-payment-intent", response_model=PaymentIntentRead)
async def create_payment_intent(
    current_user: User = Depends(get_current_user),
    gateway: StripeGateway = Depends(get_payment_gateway),
) -> PaymentIntentRead:
    try:
        client_secret = await PaymentService.create_premium_intent(gateway, current_user)
    except (httpx.HTTPError, RuntimeError) as e:
        logger.error("Creating payment intent for user %s failed: %s", current_user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating payment intent: {e}",
        )
    return PaymentIntentRead(client_secret=client_secret)


@router.post("/subscribe", response_model=UserRead)
async def subscribe(
    data: SubscribeRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
    gateway: StripeGateway = Depends(get_payment_gateway),
) -> UserRead:
    """Upgrade the caller to premium after a successful payment."""
    try:
        updated = await PaymentService.confirm_subscription(storage, gateway, current_user, data.payment_intent_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except (httpx.HTTPError, RuntimeError) as e:
        logger.error("Confirming subscription for user %s failed: %s", current_user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to process subscription: {e}",
        )
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(updated)
