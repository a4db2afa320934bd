from pydantic import BaseModel

USER_UPGRADED_EVENT = 'user.upgraded'


class WebhookData(BaseModel):
    user_id: str


class WebhookEvent(BaseModel):
    event: str
    data: WebhookData
