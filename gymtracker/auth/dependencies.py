"""FastAPI dependencies for authentication."""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from gymtracker.auth.identity import IdentityClaim

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def get_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> IdentityClaim:
    """Resolve the caller's identity through the app's configured provider.

    Args:
        request: Incoming request (carries the app's identity provider)
        credentials: Bearer credentials, or None when no bearer header was sent

    Raises:
        HTTPException: If the provider rejects the request
    """
    return request.app.state.identity_provider.resolve(credentials)
