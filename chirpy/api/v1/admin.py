from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlmodel import Session
from chirpy.core.config import settings
from chirpy.db.session import get_session
from chirpy.services.user_service import delete_all_users

router = APIRouter(prefix='/admin', tags=['admin'])


@router.post('/reset')
def reset(session: Session = Depends(get_session)) -> dict:
    if settings.PLATFORM != 'dev':
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail='Not allowed')
    deleted = delete_all_users(session)
    logger.warning('admin.reset', deleted_users=deleted)
    return {'status': 'ok', 'deleted_users': deleted}
