"""Login, refresh, revoke and per-request authorization.

Every failure surfaces as an AuthError whose kind is deliberately coarse:
unknown email and wrong password are the same INVALID_CREDENTIALS, and a
missing, malformed, expired or revoked credential is always UNAUTHORIZED.
"""
import secrets
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from jose import JWTError
from loguru import logger
from passlib.exc import PasswordTruncateError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from chirpy.core.config import settings
from chirpy.core.errors import AuthError, AuthErrorKind
from chirpy.db.session import get_session
from chirpy.models.user import User
from chirpy.services import refresh_tokens, user_service
from chirpy.services.credentials import MissingCredentialError, get_api_key, get_bearer_token
from chirpy.services.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password
from chirpy.services.session_tokens import InvalidTokenError, issue_session_token, validate_session_token


_PASSWORD_TOO_LONG = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"

@dataclass(frozen=True)
class LoginResult:
    user: User
    token: str
    refresh_token: str


def _internal(session: Optional[Session], event: str, **context) -> AuthError:
    logger.exception(event, **context)
    if session is not None:
        session.rollback()
    return AuthError(AuthErrorKind.INTERNAL)


@lru_cache
def _placeholder_digest() -> str:
    return hash_password(secrets.token_hex(16))


def _issue_session_token(user_id: str, signing_secret: str, session_ttl: timedelta) -> str:
    try:
        return issue_session_token(user_id, signing_secret, session_ttl)
    except JWTError as exc:
        raise _internal(None, 'auth.session_token.sign_failed', user_id=user_id) from exc


def register(session: Session, email: str, password: str) -> User:
    if not email or not password:
        raise AuthError(AuthErrorKind.INVALID_INPUT, 'Email and password are required')
    try:
        if user_service.get_user_by_email(session, email):
            raise AuthError(AuthErrorKind.INVALID_INPUT, 'Email already registered')
        user = user_service.create_user(session, email, hash_password(password))
    except PasswordTruncateError as exc:
        raise AuthError(AuthErrorKind.INVALID_INPUT, _PASSWORD_TOO_LONG) from exc
    except SQLAlchemyError as exc:
        raise _internal(session, 'auth.storage_failed', operation='register') from exc
    logger.info('auth.register.created', user_id=user.id)
    return user


def login(
    session: Session,
    email: str,
    password: str,
    signing_secret: str,
    session_ttl: timedelta,
) -> LoginResult:
    try:
        user = user_service.get_user_by_email(session, email)
    except SQLAlchemyError as exc:
        raise _internal(session, 'auth.storage_failed', operation='login') from exc
    digest = user.hashed_password if user else _placeholder_digest()
    if not verify_password(password, digest) or not user:
        logger.info('auth.login.failed')
        raise AuthError(AuthErrorKind.INVALID_CREDENTIALS)

    token = _issue_session_token(user.id, signing_secret, session_ttl)
    try:
        record = refresh_tokens.issue_refresh_token(session, user.id)
    except SQLAlchemyError as exc:
        raise _internal(session, 'auth.storage_failed', operation='issue_refresh_token') from exc
    logger.info('auth.login.succeeded', user_id=user.id)
    return LoginResult(user=user, token=token, refresh_token=record.token)


def authorize(headers: Mapping[str, str], signing_secret: str) -> str:
    try:
        token = get_bearer_token(headers)
        return validate_session_token(token, signing_secret)
    except (MissingCredentialError, InvalidTokenError) as exc:
        logger.debug('auth.authorize.rejected', reason=exc.__class__.__name__)
        raise AuthError(AuthErrorKind.UNAUTHORIZED) from exc


def ensure_owner(account_id: str, owner_id: str) -> None:
    if account_id != owner_id:
        logger.info('auth.forbidden', user_id=account_id)
        raise AuthError(AuthErrorKind.FORBIDDEN)


def authorize_api_key(headers: Mapping[str, str], expected_key: Optional[str]) -> None:
    try:
        presented = get_api_key(headers)
    except MissingCredentialError as exc:
        raise AuthError(AuthErrorKind.UNAUTHORIZED) from exc
    if not expected_key or not secrets.compare_digest(presented.encode(), expected_key.encode()):
        logger.warning('auth.api_key.rejected')
        raise AuthError(AuthErrorKind.UNAUTHORIZED)


def refresh(
    session: Session,
    headers: Mapping[str, str],
    signing_secret: str,
    session_ttl: timedelta,
) -> str:
    try:
        presented = get_bearer_token(headers)
    except MissingCredentialError as exc:
        raise AuthError(AuthErrorKind.UNAUTHORIZED) from exc
    try:
        record = refresh_tokens.lookup_refresh_token(session, presented)
    except SQLAlchemyError as exc:
        raise _internal(session, 'auth.storage_failed', operation='refresh') from exc
    if not refresh_tokens.is_usable(record):
        logger.info('auth.refresh.rejected')
        raise AuthError(AuthErrorKind.UNAUTHORIZED)
    return _issue_session_token(record.user_id, signing_secret, session_ttl)


def revoke(session: Session, headers: Mapping[str, str]) -> None:
    try:
        presented = get_bearer_token(headers)
    except MissingCredentialError as exc:
        raise AuthError(AuthErrorKind.UNAUTHORIZED) from exc
    try:
        found = refresh_tokens.revoke_refresh_token(session, presented)
    except SQLAlchemyError as exc:
        raise _internal(session, 'auth.storage_failed', operation='revoke') from exc
    if not found:
        raise AuthError(AuthErrorKind.UNAUTHORIZED)
    logger.info('auth.revoke.completed')


def update_account(
    session: Session,
    headers: Mapping[str, str],
    signing_secret: str,
    email: Optional[str] = None,
    password: Optional[str] = None,
) -> User:
    user_id = authorize(headers, signing_secret)
    if password is not None and not password:
        raise AuthError(AuthErrorKind.INVALID_INPUT, 'Password must not be empty')
    try:
        user = user_service.get_user(session, user_id)
        if not user:
            raise AuthError(AuthErrorKind.UNAUTHORIZED)
        hashed = hash_password(password) if password is not None else None
        user = user_service.update_user(session, user, email=email, hashed_password=hashed)
    except PasswordTruncateError as exc:
        raise AuthError(AuthErrorKind.INVALID_INPUT, _PASSWORD_TOO_LONG) from exc
    except ValueError as exc:
        raise AuthError(AuthErrorKind.INVALID_INPUT, str(exc)) from exc
    except SQLAlchemyError as exc:
        raise _internal(session, 'auth.storage_failed', operation='update_account') from exc
    logger.info('auth.account.updated', user_id=user.id)
    return user


def get_current_user_id(request: Request) -> str:
    return authorize(request.headers, settings.JWT_SECRET.get_secret_value())


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
) -> User:
    user = user_service.get_user(session, user_id)
    if not user:
        raise AuthError(AuthErrorKind.UNAUTHORIZED)
    return user
