from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from chirpy.services.session_tokens import InvalidTokenError, issue_session_token, validate_session_token


def test_issue_then_validate_returns_account_id():
    account_id = str(uuid4())
    token = issue_session_token(account_id, 'potato', timedelta(minutes=10))
    assert validate_session_token(token, 'potato') == account_id


def test_token_carries_registered_claims():
    account_id = str(uuid4())
    token = issue_session_token(account_id, 'potato', timedelta(hours=1))
    claims = jwt.get_unverified_claims(token)
    assert claims['iss'] == 'chirpy'
    assert claims['sub'] == account_id
    assert claims['exp'] > claims['iat']


def test_tokens_minted_together_are_distinct():
    account_id = str(uuid4())
    first = issue_session_token(account_id, 'potato', timedelta(hours=1))
    second = issue_session_token(account_id, 'potato', timedelta(hours=1))
    assert first != second


def test_expired_token_is_rejected():
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = issue_session_token(str(uuid4()), 'potato', timedelta(hours=1), now=issued)
    with pytest.raises(InvalidTokenError):
        validate_session_token(token, 'potato')


def test_token_signed_with_other_secret_is_rejected():
    token = issue_session_token(str(uuid4()), 'secret-one', timedelta(hours=1))
    with pytest.raises(InvalidTokenError):
        validate_session_token(token, 'secret-two')


@pytest.mark.parametrize('token', ['', 'garbage', 'a.b.c'])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        validate_session_token(token, 'potato')


def test_non_uuid_subject_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {'iss': 'chirpy', 'sub': 'not-a-uuid', 'iat': now, 'exp': now + timedelta(hours=1)},
        'potato',
        algorithm='HS256',
    )
    with pytest.raises(InvalidTokenError):
        validate_session_token(token, 'potato')


def test_foreign_issuer_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {'iss': 'someone-else', 'sub': str(uuid4()), 'iat': now, 'exp': now + timedelta(hours=1)},
        'potato',
        algorithm='HS256',
    )
    with pytest.raises(InvalidTokenError):
        validate_session_token(token, 'potato')


def test_non_positive_ttl_is_refused():
    with pytest.raises(ValueError):
        issue_session_token(str(uuid4()), 'potato', timedelta(0))


def test_token_is_rejected_at_its_expiry_second():
    issued = datetime.now(timezone.utc) - timedelta(seconds=1)
    token = issue_session_token(str(uuid4()), 'potato', timedelta(seconds=1), now=issued)
    with pytest.raises(InvalidTokenError):
        validate_session_token(token, 'potato')
