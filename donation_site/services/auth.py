"""
Token issuing and verification.

Tokens are HS256 JWTs carrying the caller's identity and role. Verification
never raises: a bad, expired or foreign token simply yields no identity, and
each operation decides for itself whether an anonymous caller is allowed.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Verified caller, decoded from token claims."""

    user_id: str
    email: str
    role: str
    first_name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "Identity":
        return cls(
            user_id=claims["sub"],
            email=claims["email"],
            role=claims["role"],
            first_name=claims.get("firstName"),
        )


class AuthService:
    """Signs and verifies access tokens with a server-held secret."""

    def __init__(self, secret: str, expires_in: timedelta):
        if not secret:
            raise ValueError("A token signing secret is required")
        self.secret = secret
        self.expires_in = expires_in

    def sign_token(self, user, now: Optional[datetime] = None) -> str:
        """Create an access token for ``user`` (anything with id, first_name, email, role)."""
        issued = now or datetime.now(timezone.utc)
        claims = {
            "sub": user.id,
            "firstName": user.first_name,
            "email": user.email,
            "role": user.role,
            "iat": int(issued.timestamp()),
            "exp": int((issued + self.expires_in).timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=ALGORITHM)

    def verify_token(self, token: Optional[str]) -> Optional[Identity]:
        """Decode ``token``; None for anything that is not a valid, unexpired token."""
        if not token:
            return None
        try:
            claims = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
            return Identity.from_claims(claims)
        except JWTError as e:
            logger.warning(f"Token verification failed: {e}")
        except (KeyError, TypeError):
            logger.warning("Token verification failed: missing identity claims")
        return None

    def identity_from_header(self, header: Optional[str]) -> Optional[Identity]:
        """Resolve an ``Authorization`` header value to an identity, or None."""
        if not header or not header.startswith(BEARER_PREFIX):
            return None
        return self.verify_token(header[len(BEARER_PREFIX):].strip())
