"""JWT token validation for gymtracker."""

import jwt
from typing import Optional, Dict


def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> Optional[Dict]:
    """Decode and validate a JWT access token.

    Args:
        token: JWT token string to decode
        secret_key: Signing secret
        algorithm: Expected signing algorithm

    Returns:
        Decoded token payload (dict with 'sub' key for user_id), or None if invalid
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
