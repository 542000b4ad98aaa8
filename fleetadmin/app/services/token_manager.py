"""
Bearer token issuance and validation.

One TokenManager type serves every token namespace; each namespace
(tenant admins, end users) gets its own instance with its own secret and
expiration.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt
from pydantic import BaseModel, Field

RESERVED_CLAIMS = ("sub", "iat", "nbf", "exp", "email")


class TokenNamespace(str, Enum):
    admin = "admin"
    user = "user"


class ExpiredTokenError(Exception):
    """Token was valid but its exp claim has passed"""


class InvalidTokenError(Exception):
    """Token is malformed, tampered with or signed with another key/algorithm"""


class TokenClaims(BaseModel):
    """Verified claims of a bearer token"""

    identity_id: int
    email: Optional[str] = None
    issued_at: datetime
    not_before: datetime
    expires_at: datetime
    extra: Dict[str, Any] = Field(default_factory=dict)


def _from_timestamp(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value), UTC)


class TokenManager:
    """
    HMAC-signed, time-bounded bearer tokens.

    Business Rules:
    - Only the configured symmetric algorithm is accepted (no alg substitution)
    - Expiry is reported separately from every other failure
    - Signature failures and malformed tokens are indistinguishable to callers
    - clock drives both issuing and the exp/nbf checks on validation
    """

    def __init__(
        self,
        secret: str,
        expiration: timedelta,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        if expiration <= timedelta(0):
            raise ValueError("Token expiration must be positive")
        if not algorithm.startswith("HS"):
            raise ValueError("Only HMAC algorithms are supported")
        self.secret = secret
        self.expiration = expiration
        self.algorithm = algorithm
        self.clock = clock or (lambda: datetime.now(UTC))

    def issue(self, identity_id: int, claims: Optional[Dict[str, Any]] = None) -> str:
        """
        Issue a signed token for an identity.

        Args:
            identity_id: Numeric id stored in the sub claim
            claims: Optional extra claims (email, role, company_id, ...)

        Returns:
            Encoded JWT string
        """
        now = self.clock()
        payload: Dict[str, Any] = dict(claims or {})
        payload.update(
            {
                "sub": str(identity_id),
                "iat": now,
                "nbf": now,
                "exp": now + self.expiration,
            }
        )
        if payload.get("email") is None:
            payload.pop("email", None)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            ExpiredTokenError: exp has passed
            InvalidTokenError: anything else is wrong with the token
        """
        if not isinstance(token, str) or not token:
            raise InvalidTokenError("Token is empty")

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={
                    # exp and nbf are checked below against self.clock
                    "verify_exp": False,
                    "verify_nbf": False,
                    "require_exp": True,
                    "require_iat": True,
                    "require_nbf": True,
                    "require_sub": True,
                },
            )
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc

        try:
            claims = TokenClaims(
                identity_id=int(payload["sub"]),
                email=payload.get("email"),
                issued_at=_from_timestamp(payload["iat"]),
                not_before=_from_timestamp(payload["nbf"]),
                expires_at=_from_timestamp(payload["exp"]),
                extra={k: v for k, v in payload.items() if k not in RESERVED_CLAIMS},
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError("Invalid token") from exc

        now = self.clock()
        if claims.expires_at <= now:
            raise ExpiredTokenError("Token has expired")
        if claims.not_before > now:
            raise InvalidTokenError("Token is not valid yet")
        return claims
