from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from fleetadmin.app.services.token_manager import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenManager,
)

SECRET = "unit-secret"


def test_issue_and_validate_round_trip():
    tokens = TokenManager(SECRET, timedelta(hours=24))

    token = tokens.issue(42, {"email": "owner@acme.com", "role": "owner", "company_id": 7})
    claims = tokens.validate(token)

    assert claims.identity_id == 42
    assert claims.email == "owner@acme.com"
    assert claims.extra == {"role": "owner", "company_id": 7}
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)


def test_sub_claim_is_a_string():
    token = TokenManager(SECRET, timedelta(hours=1)).issue(5)
    payload = jwt.get_unverified_claims(token)

    assert payload["sub"] == "5"
    assert "email" not in payload


def test_expired_token_is_distinguished():
    past = datetime.now(UTC) - timedelta(hours=2)
    issuer = TokenManager(SECRET, timedelta(hours=1), clock=lambda: past)
    token = issuer.issue(1)

    with pytest.raises(ExpiredTokenError):
        TokenManager(SECRET, timedelta(hours=1)).validate(token)


def test_token_just_inside_expiry_is_accepted():
    issued = datetime.now(UTC) - timedelta(hours=1) + timedelta(seconds=30)
    token = TokenManager(SECRET, timedelta(hours=1), clock=lambda: issued).issue(1)

    assert TokenManager(SECRET, timedelta(hours=1)).validate(token).identity_id == 1


def test_foreign_secret_is_invalid():
    token = TokenManager("other-secret", timedelta(hours=1)).issue(1)

    with pytest.raises(InvalidTokenError):
        TokenManager(SECRET, timedelta(hours=1)).validate(token)


def test_tampered_payload_is_invalid():
    token = TokenManager(SECRET, timedelta(hours=1)).issue(1)
    header, payload, signature = token.split(".")
    forged = jwt.encode({"sub": "2"}, "x", algorithm="HS256").split(".")[1]

    with pytest.raises(InvalidTokenError):
        TokenManager(SECRET, timedelta(hours=1)).validate(f"{header}.{forged}.{signature}")


def test_algorithm_substitution_is_rejected():
    now = datetime.now(UTC)
    claims = {"sub": "1", "iat": now, "nbf": now, "exp": now + timedelta(hours=1)}
    token = jwt.encode(claims, SECRET, algorithm="HS512")

    with pytest.raises(InvalidTokenError):
        TokenManager(SECRET, timedelta(hours=1)).validate(token)


def test_unsigned_token_is_rejected():
    tokens = TokenManager(SECRET, timedelta(hours=1))
    header, payload, _ = tokens.issue(1).split(".")
    # {"alg":"none","typ":"JWT"}
    none_header = "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0"

    with pytest.raises(InvalidTokenError):
        tokens.validate(f"{none_header}.{payload}.")


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "a.b"])
def test_malformed_token_is_invalid(token):
    with pytest.raises(InvalidTokenError):
        TokenManager(SECRET, timedelta(hours=1)).validate(token)


def test_non_numeric_sub_is_invalid():
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "abc", "iat": now, "nbf": now, "exp": now + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        TokenManager(SECRET, timedelta(hours=1)).validate(token)


def test_future_not_before_is_invalid():
    future = datetime.now(UTC) + timedelta(hours=1)
    token = TokenManager(SECRET, timedelta(hours=2), clock=lambda: future).issue(1)

    with pytest.raises(InvalidTokenError):
        TokenManager(SECRET, timedelta(hours=2)).validate(token)


@pytest.mark.parametrize(
    "secret,expiration,algorithm",
    [
        ("", timedelta(hours=1), "HS256"),
        (SECRET, timedelta(0), "HS256"),
        (SECRET, timedelta(hours=-1), "HS256"),
        (SECRET, timedelta(hours=1), "RS256"),
    ],
)
def test_invalid_construction(secret, expiration, algorithm):
    with pytest.raises(ValueError):
        TokenManager(secret, expiration, algorithm=algorithm)


def test_expiry_boundary_follows_the_clock():
    issued = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    expires = issued + timedelta(hours=1)
    token = TokenManager(SECRET, timedelta(hours=1), clock=lambda: issued).issue(1)

    before = TokenManager(SECRET, timedelta(hours=1), clock=lambda: expires - timedelta(seconds=1))
    after = TokenManager(SECRET, timedelta(hours=1), clock=lambda: expires + timedelta(seconds=1))

    assert before.validate(token).expires_at == expires
    with pytest.raises(ExpiredTokenError):
        after.validate(token)


def test_not_before_follows_the_clock():
    issued = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    token = TokenManager(SECRET, timedelta(hours=1), clock=lambda: issued).issue(1)
    earlier = TokenManager(SECRET, timedelta(hours=1), clock=lambda: issued - timedelta(seconds=1))

    with pytest.raises(InvalidTokenError):
        earlier.validate(token)
