"""Newsletter subscriber API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from bookhaven.api.v1.dependencies import (
    get_subscription_service,
    get_subscription_service_for_write,
)
from bookhaven.application.use_cases import SubscriptionService
from bookhaven.core.limiter import limit_public_forms
from bookhaven.schemas.common import MessageResponse
from bookhaven.schemas.subscriber import (
    SubscribeRequest,
    SubscriberCountResponse,
    SubscriberResponse,
    UnsubscribeRequest,
)

router = APIRouter()


@router.post("", response_model=SubscriberResponse, status_code=201)
@limit_public_forms
async def subscribe(
    request: Request,
    response: Response,
    body: SubscribeRequest,
    subscriptions: Annotated[
        SubscriptionService, Depends(get_subscription_service_for_write)
    ],
):
    """Subscribe (201), or reactivate a previous subscription (200)."""
    outcome = await subscriptions.subscribe(body.email, body.name)
    if outcome.reactivated:
        response.status_code = 200
    return SubscriberResponse.model_validate(outcome.subscriber)


@router.post("/unsubscribe", response_model=MessageResponse)
@limit_public_forms
async def unsubscribe(
    request: Request,
    body: UnsubscribeRequest,
    subscriptions: Annotated[
        SubscriptionService, Depends(get_subscription_service_for_write)
    ],
):
    await subscriptions.unsubscribe(body.email)
    return MessageResponse(message="Successfully unsubscribed.")


@router.get("/count", response_model=SubscriberCountResponse)
async def count_subscribers(
    subscriptions: Annotated[SubscriptionService, Depends(get_subscription_service)],
):
    return SubscriberCountResponse(count=await subscriptions.count_active())
