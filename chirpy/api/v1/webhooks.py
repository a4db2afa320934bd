from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from loguru import logger
from sqlmodel import Session
from chirpy.core.config import settings
from chirpy.db.session import get_session
from chirpy.schemas.webhook import USER_UPGRADED_EVENT, WebhookEvent
from chirpy.services.auth_service import authorize_api_key
from chirpy.services.user_service import upgrade_to_chirpy_red

router = APIRouter(prefix='/polka', tags=['webhooks'])


@router.post('/webhooks', status_code=status.HTTP_204_NO_CONTENT)
def polka_webhook(
    payload: WebhookEvent,
    request: Request,
    session: Session = Depends(get_session),
) -> Response:
    expected = settings.POLKA_KEY.get_secret_value() if settings.POLKA_KEY else None
    authorize_api_key(request.headers, expected)
    if payload.event != USER_UPGRADED_EVENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    user = upgrade_to_chirpy_red(session, payload.data.user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')
    logger.info('webhook.user_upgraded', user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
