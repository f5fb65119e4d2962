"""Newsletter subscriber API schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from bookhaven.schemas.common import ApiModel


class SubscribeRequest(ApiModel):
    """Body for POST /subscribers."""

    email: EmailStr = Field(..., max_length=255)
    name: str | None = Field(default=None, max_length=100)


class UnsubscribeRequest(ApiModel):
    """Body for POST /subscribers/unsubscribe. Blank email is rejected by the service."""

    email: str = Field(default="", max_length=255)


class SubscriberResponse(ApiModel):
    id: int
    email: str
    name: str | None = None
    subscribed_date: datetime
    is_active: bool


class SubscriberCountResponse(ApiModel):
    count: int
