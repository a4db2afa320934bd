from datetime import datetime, timedelta, timezone

from chirpy.models.user import User
from chirpy.services import refresh_tokens


def _user(session) -> User:
    user = User(email='owner@example.com', hashed_password='x')
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def test_make_refresh_token_is_256_bits_of_hex():
    token = refresh_tokens.make_refresh_token()
    assert len(token) == 64
    int(token, 16)


def test_issue_persists_sixty_day_record(session):
    user = _user(session)
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    record = refresh_tokens.issue_refresh_token(session, user.id, now=now)

    stored = refresh_tokens.lookup_refresh_token(session, record.token)
    assert stored is not None
    assert stored.user_id == user.id
    assert stored.revoked_at is None
    assert refresh_tokens._ensure_utc(stored.expires_at) == now + timedelta(days=60)


def test_issue_twice_yields_distinct_usable_tokens(session):
    user = _user(session)
    first = refresh_tokens.issue_refresh_token(session, user.id)
    second = refresh_tokens.issue_refresh_token(session, user.id)
    assert first.token != second.token
    assert refresh_tokens.is_usable(refresh_tokens.lookup_refresh_token(session, first.token))
    assert refresh_tokens.is_usable(refresh_tokens.lookup_refresh_token(session, second.token))


def test_lookup_unknown_token_returns_none(session):
    assert refresh_tokens.lookup_refresh_token(session, 'missing') is None
    assert not refresh_tokens.is_usable(None)


def test_revoke_keeps_record_but_makes_it_unusable(session):
    user = _user(session)
    record = refresh_tokens.issue_refresh_token(session, user.id)

    assert refresh_tokens.revoke_refresh_token(session, record.token)
    stored = refresh_tokens.lookup_refresh_token(session, record.token)
    assert stored is not None
    assert stored.revoked_at is not None
    assert not refresh_tokens.is_usable(stored)

    assert refresh_tokens.revoke_refresh_token(session, record.token)


def test_revoke_unknown_token_reports_not_found(session):
    assert refresh_tokens.revoke_refresh_token(session, 'missing') is False


def test_token_expires_at_horizon(session):
    user = _user(session)
    issued = datetime.now(timezone.utc) - timedelta(days=61)
    record = refresh_tokens.issue_refresh_token(session, user.id, now=issued)
    assert not refresh_tokens.is_usable(record)
    assert refresh_tokens.is_usable(record, now=issued + timedelta(days=59))
    assert not refresh_tokens.is_usable(record, now=issued + timedelta(days=60))
