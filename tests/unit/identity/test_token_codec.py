"""
Name: Token Codec Tests

Responsibilities:
  - Sign/verify round trip
  - Expiry evaluated against the injected clock
  - Rejection of tampered, foreign-algorithm and malformed tokens
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from hr_system.domain.entities import AccountRole
from hr_system.identity.errors import (
    TokenExpiredError,
    TokenGenerationError,
    TokenInvalidError,
)
from hr_system.identity.token_codec import JWTTokenCodec

pytestmark = pytest.mark.unit

SECRET = "unit-secret-0123456789-abcdefghijklmn"
ISSUER = "hr-system"


def _codec(clock, secret: str = SECRET, issuer: str = ISSUER) -> JWTTokenCodec:
    return JWTTokenCodec(secret=secret, issuer=issuer, clock=clock)


def _payload(now: datetime, **overrides) -> dict:
    issued_at = int(now.timestamp())
    payload = {
        "sub": str(uuid4()),
        "email": "jane@co.com",
        "role": 2,
        "iat": issued_at,
        "nbf": issued_at,
        "exp": issued_at + 3600,
        "iss": ISSUER,
        "typ": "access",
    }
    payload.update(overrides)
    return {k: v for k, v in payload.items() if v is not None}


def test_round_trip_returns_identity(fixed_clock):
    codec = _codec(fixed_clock)
    account_id = uuid4()

    token = codec.sign(
        subject_id=account_id,
        email="jane@co.com",
        role=AccountRole.HR,
        ttl_seconds=3600,
    )
    claims = codec.verify(token)

    assert claims.subject_id == account_id
    assert claims.email == "jane@co.com"
    assert claims.role == AccountRole.HR
    assert claims.expires_at - claims.issued_at == timedelta(seconds=3600)


def test_each_signed_token_is_unique(fixed_clock):
    codec = _codec(fixed_clock)
    account_id = uuid4()

    first = codec.sign(
        subject_id=account_id, email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )
    second = codec.sign(
        subject_id=account_id, email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )

    assert first != second


def test_token_is_valid_at_exact_expiry(fixed_clock):
    codec = _codec(fixed_clock)
    token = codec.sign(
        subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )

    fixed_clock.advance(seconds=60)

    assert codec.verify(token).email == "a@co.com"


def test_token_past_expiry_raises_expired(fixed_clock):
    codec = _codec(fixed_clock)
    token = codec.sign(
        subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )

    fixed_clock.advance(seconds=61)

    with pytest.raises(TokenExpiredError):
        codec.verify(token)


def test_token_before_not_before_is_invalid_not_expired(fixed_clock):
    codec = _codec(fixed_clock)
    token = codec.sign(
        subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )

    fixed_clock.advance(seconds=-30)

    with pytest.raises(TokenInvalidError) as exc_info:
        codec.verify(token)
    assert not isinstance(exc_info.value, TokenExpiredError)


def test_token_signed_with_other_secret_is_invalid(fixed_clock):
    token = _codec(fixed_clock, secret="another-secret-0123456789-abcdefghij").sign(
        subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_tampered_payload_is_invalid(fixed_clock):
    codec = _codec(fixed_clock)
    token = codec.sign(
        subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )
    forged_body = jwt.encode(
        _payload(fixed_clock.now(), role=0), "whatever-secret-0123456789-abcdefgh"
    ).split(".")[1]
    header, _, signature = token.split(".")

    with pytest.raises(TokenInvalidError):
        codec.verify(f"{header}.{forged_body}.{signature}")


def test_other_hmac_algorithm_is_rejected(fixed_clock):
    token = jwt.encode(_payload(fixed_clock.now()), SECRET, algorithm="HS512")

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_unsigned_token_is_rejected(fixed_clock):
    token = jwt.encode(_payload(fixed_clock.now()), None, algorithm="none")

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_wrong_issuer_is_rejected(fixed_clock):
    token = jwt.encode(_payload(fixed_clock.now(), iss="someone-else"), SECRET)

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


@pytest.mark.parametrize("missing", ["sub", "email", "role", "exp"])
def test_missing_required_claim_is_rejected(fixed_clock, missing):
    payload = _payload(fixed_clock.now())
    payload.pop(missing)
    token = jwt.encode(payload, SECRET)

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_unknown_role_is_rejected(fixed_clock):
    token = jwt.encode(_payload(fixed_clock.now(), role=7), SECRET)

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_non_uuid_subject_is_rejected(fixed_clock):
    token = jwt.encode(_payload(fixed_clock.now(), sub="not-a-uuid"), SECRET)

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_non_access_token_type_is_rejected(fixed_clock):
    token = jwt.encode(_payload(fixed_clock.now(), typ="refresh"), SECRET)

    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_garbage_is_rejected(fixed_clock, token):
    with pytest.raises(TokenInvalidError):
        _codec(fixed_clock).verify(token)


def test_expiry_uses_injected_clock_not_wall_clock():
    past = datetime(2001, 1, 1, tzinfo=timezone.utc)

    class _Clock:
        def now(self):
            return past

    codec = _codec(_Clock())
    token = codec.sign(
        subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
    )

    assert codec.verify(token).issued_at == past


def test_signing_failure_is_token_generation_error(fixed_clock, monkeypatch):
    def _broken_encode(*args, **kwargs):
        raise jwt.PyJWTError("key rejected")

    monkeypatch.setattr(jwt, "encode", _broken_encode)

    with pytest.raises(TokenGenerationError) as exc_info:
        _codec(fixed_clock).sign(
            subject_id=uuid4(), email="a@co.com", role=AccountRole.EMPLOYEE, ttl_seconds=60
        )

    assert isinstance(exc_info.value.original_error, jwt.PyJWTError)
