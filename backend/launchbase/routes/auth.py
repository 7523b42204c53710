"""Auth routes — the token itself is issued by the external auth provider."""

from fastapi import APIRouter, Depends

from ..models.user import User
from ..schemas.auth_schema import UserResponse
from ..services.auth_dependency import get_current_user

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get("/me", response_model=UserResponse, summary="Get current user")
def get_me(user: User = Depends(get_current_user)) -> UserResponse:
    """Return the authenticated user, provisioning the local record on first call."""
    return UserResponse(
        id=str(user.id),
        email=user.email,
        username=user.username or "",
        auth_provider=user.auth_provider,
        created_at=user.created_at,
    )
