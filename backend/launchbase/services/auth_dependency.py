"""FastAPI dependency for JWT-based route protection."""

from __future__ import annotations

import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from .auth_utils import decode_access_token
from .notification_service import create_notification

_bearer_scheme = HTTPBearer(auto_error=False)


def _provision_user(db: Session, user_id: uuid.UUID, payload: dict) -> User:
    """Mirror a user we have not seen before from the token claims."""
    email = (payload.get("email") or "").strip()
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    if db.query(User).filter(User.email == email).first() is not None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token subject does not match the account for this email",
        )

    user = User(
        id=user_id,
        email=email,
        username=payload.get("username") or email.split("@")[0],
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    create_notification(
        db,
        user_id=user.id,
        title="Welcome to Launchbase!",
        message="Connect your MVP to get started with AI-powered go-to-market insights.",
        type="info",
    )
    print(f"✅ [Auth] Provisioned user {user.email}")
    return user


def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Extract and validate the JWT from the Authorization header.

    Returns the authenticated User ORM instance, creating the local
    record on first sight.
    Raises 401 if token is missing, invalid, or expired.
    """
    if creds is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(creds.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    user = db.query(User).filter(User.id == str(user_id)).first()
    if user is None:
        user = _provision_user(db, user_id, payload)

    return user
