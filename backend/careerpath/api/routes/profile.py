"""Profile routes for the calling user."""

from fastapi import APIRouter, status

from careerpath.api.deps import CurrentUser, Users
from careerpath.models import User
from careerpath.schemas import ProfileCreate, ProfileResponse, ProfileUpdate
from careerpath.services import profile_service

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(data: ProfileCreate, user_id: CurrentUser, users: Users) -> User:
    """Create the profile row after sign-up."""
    return await profile_service.create_profile(users, user_id=user_id, full_name=data.full_name)


@router.get("", response_model=ProfileResponse)
async def get_profile(user_id: CurrentUser, users: Users) -> User:
    return await profile_service.get_profile(users, user_id=user_id)


@router.patch("", response_model=ProfileResponse)
async def update_profile(data: ProfileUpdate, user_id: CurrentUser, users: Users) -> User:
    return await profile_service.update_profile(
        users, user_id=user_id, **data.model_dump(exclude_unset=True)
    )
