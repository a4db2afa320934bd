"""Signed, self-contained session tokens (HS256 JWTs).

Validation is a pure function of the token, the signing secret and the clock;
nothing is looked up in storage, so a session token cannot be revoked before
it expires.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt

from chirpy.core.config import JWT_ISSUER

ALGORITHM = 'HS256'


class InvalidTokenError(Exception):
    """Raised for any token that is malformed, expired or badly signed."""


def issue_session_token(
    account_id: str,
    signing_secret: str,
    ttl: timedelta,
    now: Optional[datetime] = None,
) -> str:
    if ttl <= timedelta(0):
        raise ValueError('ttl must be positive')
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        'iss': JWT_ISSUER,
        'sub': str(account_id),
        'iat': issued_at,
        'exp': issued_at + ttl,
        'jti': uuid4().hex,
    }
    return jwt.encode(payload, signing_secret, algorithm=ALGORITHM)


def validate_session_token(token: str, signing_secret: str) -> str:
    try:
        payload = jwt.decode(
            token,
            signing_secret,
            algorithms=[ALGORITHM],
            issuer=JWT_ISSUER,
            options={'require_exp': True, 'require_iat': True, 'require_sub': True},
        )
        if payload['exp'] <= int(datetime.now(timezone.utc).timestamp()):
            raise InvalidTokenError('token expired')
        return str(UUID(payload['sub']))
    except (JWTError, KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError('invalid token') from exc
