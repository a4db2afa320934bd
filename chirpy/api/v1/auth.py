from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel import Session
from chirpy.core.config import settings
from chirpy.db.session import get_session
from chirpy.schemas.auth import LoginRequest, LoginResponse, TokenResponse
from chirpy.services import auth_service
from chirpy.services.user_service import to_user_out

router = APIRouter(tags=['auth'])


@router.post('/login', response_model=LoginResponse)
def login(payload: LoginRequest, session: Session = Depends(get_session)) -> LoginResponse:
    result = auth_service.login(
        session,
        payload.email,
        payload.password,
        settings.JWT_SECRET.get_secret_value(),
        settings.session_ttl,
    )
    profile = to_user_out(result.user)
    return LoginResponse(**profile.model_dump(), token=result.token, refresh_token=result.refresh_token)


@router.post('/refresh', response_model=TokenResponse)
def refresh(request: Request, session: Session = Depends(get_session)) -> TokenResponse:
    token = auth_service.refresh(
        session,
        request.headers,
        settings.JWT_SECRET.get_secret_value(),
        settings.session_ttl,
    )
    return TokenResponse(token=token)


@router.post('/revoke', status_code=status.HTTP_204_NO_CONTENT)
def revoke(request: Request, session: Session = Depends(get_session)) -> Response:
    auth_service.revoke(session, request.headers)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
