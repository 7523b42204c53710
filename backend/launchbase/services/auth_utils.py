"""JWT helpers for tokens issued by the external auth provider.

Rules
-----
- NO hardcoded secrets in production — JWT_SECRET comes from the environment
- Tokens carry ``sub`` (user UUID), ``email`` and ``username``
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

_JWT_SECRET = os.getenv("JWT_SECRET", "launchbase-dev-secret-change-in-production")
_JWT_ALGORITHM = "HS256"
_JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", "1440"))  # 24h default


def create_access_token(user_id: str, email: str, username: str = "") -> str:
    """Create a signed JWT containing user_id, email, and username."""
    expire = datetime.utcnow() + timedelta(minutes=_JWT_EXPIRE_MINUTES)
    payload = {
        "sub": user_id,
        "email": email,
        "username": username,
        "exp": expire,
    }
    return jwt.encode(payload, _JWT_SECRET, algorithm=_JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and validate a JWT. Returns payload dict or None."""
    try:
        return jwt.decode(token, _JWT_SECRET, algorithms=[_JWT_ALGORITHM])
    except JWTError:
        return None
