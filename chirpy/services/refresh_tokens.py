"""Opaque, storage-backed refresh tokens.

A token is Active until it is revoked or its expiry passes; both end states are
terminal and rows are kept for audit.
"""
import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Session, select

from chirpy.core.config import REFRESH_TOKEN_TTL
from chirpy.models.refresh_token import RefreshToken

TOKEN_BYTES = 32


def _ensure_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def make_refresh_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


def issue_refresh_token(session: Session, user_id: str, now: Optional[datetime] = None) -> RefreshToken:
    issued_at = now or datetime.now(timezone.utc)
    record = RefreshToken(
        token=make_refresh_token(),
        user_id=user_id,
        created_at=issued_at,
        updated_at=issued_at,
        expires_at=issued_at + REFRESH_TOKEN_TTL,
        revoked_at=None,
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def lookup_refresh_token(session: Session, token: str) -> Optional[RefreshToken]:
    return session.exec(select(RefreshToken).where(RefreshToken.token == token)).first()


def revoke_refresh_token(session: Session, token: str, now: Optional[datetime] = None) -> bool:
    record = lookup_refresh_token(session, token)
    if not record:
        return False
    revoked_at = now or datetime.now(timezone.utc)
    record.revoked_at = revoked_at
    record.updated_at = revoked_at
    session.add(record)
    session.commit()
    return True


def is_usable(record: Optional[RefreshToken], now: Optional[datetime] = None) -> bool:
    if record is None or record.revoked_at is not None:
        return False
    current = now or datetime.now(timezone.utc)
    return _ensure_utc(record.expires_at) > _ensure_utc(current)
