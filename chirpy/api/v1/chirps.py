from typing import Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger
from sqlmodel import Session
from chirpy.core.config import settings
from chirpy.db.session import get_session
from chirpy.models.chirp import Chirp
from chirpy.models.user import User
from chirpy.schemas.chirp import ChirpCreate, ChirpOut
from chirpy.services.auth_service import ensure_owner, get_current_user
from chirpy.services.chirp_service import ChirpTooLongError, create_chirp, delete_chirp, get_chirp, list_chirps

router = APIRouter(prefix='/chirps', tags=['chirps'])


def _to_chirp_out(record: Chirp) -> ChirpOut:
    return ChirpOut(
        id=record.id,
        body=record.body,
        user_id=record.user_id,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _get_or_404(session: Session, chirp_id: str) -> Chirp:
    record = get_chirp(session, chirp_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Chirp not found')
    return record


@router.post('', response_model=ChirpOut, status_code=status.HTTP_201_CREATED)
def create_chirp_endpoint(
    payload: ChirpCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ChirpOut:
    try:
        record = create_chirp(session, user.id, payload.body, settings.CHIRP_MAX_LEN)
    except ChirpTooLongError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.info('chirp.created', chirp_id=record.id, user_id=user.id)
    return _to_chirp_out(record)


@router.get('', response_model=list[ChirpOut])
def list_chirps_endpoint(
    author_id: Optional[str] = None,
    sort: Literal['asc', 'desc'] = 'asc',
    session: Session = Depends(get_session),
) -> list[ChirpOut]:
    records = list_chirps(session, author_id=author_id, descending=sort == 'desc')
    return [_to_chirp_out(record) for record in records]


@router.get('/{chirp_id}', response_model=ChirpOut)
def get_chirp_endpoint(chirp_id: str, session: Session = Depends(get_session)) -> ChirpOut:
    return _to_chirp_out(_get_or_404(session, chirp_id))


@router.delete('/{chirp_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_chirp_endpoint(
    chirp_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> Response:
    record = _get_or_404(session, chirp_id)
    ensure_owner(user.id, record.user_id)
    delete_chirp(session, record)
    logger.info('chirp.deleted', chirp_id=chirp_id, user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
