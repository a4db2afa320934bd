from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session
from chirpy.core.config import settings
from chirpy.db.session import get_session
from chirpy.models.user import User
from chirpy.schemas.auth import RegisterRequest
from chirpy.schemas.user import UserOut, UserUpdate
from chirpy.services import auth_service
from chirpy.services.user_service import to_user_out

router = APIRouter(prefix='/users', tags=['users'])


@router.post('', response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, session: Session = Depends(get_session)) -> UserOut:
    user = auth_service.register(session, payload.email, payload.password)
    return to_user_out(user)


@router.put('', response_model=UserOut)
def update_account(
    payload: UserUpdate,
    request: Request,
    session: Session = Depends(get_session),
) -> UserOut:
    user = auth_service.update_account(
        session,
        request.headers,
        settings.JWT_SECRET.get_secret_value(),
        email=payload.email,
        password=payload.password,
    )
    return to_user_out(user)


@router.get('/me', response_model=UserOut)
def me(user: User = Depends(auth_service.get_current_user)) -> UserOut:
    return to_user_out(user)
