"""Profile routes — onboarding answers and per-user settings."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from ..models.user_profile import UserProfile
from ..schemas.profile_schema import OnboardingRequest, ProfileResponse
from ..services.auth_dependency import get_current_user
from ..services.profile_service import complete_onboarding, get_connected_integrations, get_or_create_profile

router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
)


def _profile_response(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(
        onboarding_completed=bool(profile.onboarding_completed),
        product_name=profile.product_name,
        product_description=profile.product_description,
        target_audience=profile.target_audience,
        problem_solving=profile.problem_solving,
        goals=profile.goals,
        timeline=profile.timeline,
        connected_integrations=get_connected_integrations(profile),
    )


@router.get("/", response_model=ProfileResponse, summary="Get profile")
def read_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileResponse:
    return _profile_response(get_or_create_profile(db, current_user.id))


@router.post("/onboarding", response_model=ProfileResponse, summary="Complete onboarding")
def onboarding(
    payload: OnboardingRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileResponse:
    profile = complete_onboarding(db, current_user.id, payload.model_dump())
    return _profile_response(profile)
