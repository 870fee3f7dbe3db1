"""Identity resolution for incoming requests.

The API depends only on `IdentityProvider`. `StaticDemoIdentity` treats every
request as the same demo user and never checks credentials;
`JwtIdentityProvider` requires a signed bearer token.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from gymtracker.auth.jwt import decode_access_token
from gymtracker.config import Settings

logger = logging.getLogger(__name__)


class IdentityClaim(BaseModel):
    """Resolved identity attached to a request."""

    sub: str = Field(..., description="User ID")
    email: Optional[str] = Field(None, description="User email, when the provider knows it")


class IdentityProvider(ABC):
    """Resolves the identity behind a request."""

    @abstractmethod
    def resolve(self, credentials: Optional[HTTPAuthorizationCredentials]) -> IdentityClaim:
        """Return the request's identity or raise HTTPException(401).

        Args:
            credentials: Bearer credentials extracted by `HTTPBearer`, or None
        """


class StaticDemoIdentity(IdentityProvider):
    """Fixed identity for demo deployments. Always succeeds."""

    def __init__(self, user_id: str = "demo-user-123", email: Optional[str] = "demo@example.com"):
        self.claim = IdentityClaim(sub=user_id, email=email)

    def resolve(self, credentials: Optional[HTTPAuthorizationCredentials]) -> IdentityClaim:
        return self.claim


class JwtIdentityProvider(IdentityProvider):
    """Identity from an `Authorization: Bearer <jwt>` header."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def resolve(self, credentials: Optional[HTTPAuthorizationCredentials]) -> IdentityClaim:
        if not credentials:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
                headers={"WWW-Authenticate": "Bearer"},
            )

        payload = decode_access_token(credentials.credentials, self.secret_key, self.algorithm)
        if not payload or not payload.get("sub"):
            logger.debug("Rejected bearer token")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return IdentityClaim(sub=payload["sub"], email=payload.get("email"))


def build_identity_provider(settings: Settings) -> IdentityProvider:
    """Pick the identity provider named by `settings.auth_mode`."""
    if settings.auth_mode == "jwt":
        return JwtIdentityProvider(settings.jwt_secret_key, settings.jwt_algorithm)
    if settings.auth_mode == "demo":
        return StaticDemoIdentity(settings.demo_user_id, settings.demo_user_email)
    raise ValueError(f"Unknown auth mode: {settings.auth_mode}")
