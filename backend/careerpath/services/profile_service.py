"""Profile service for the users table."""

from typing import Any

from careerpath.core.database import utc_now
from careerpath.core.exceptions import NotFoundError, ValidationError
from careerpath.core.logging import get_logger
from careerpath.models.user import User
from careerpath.services.validation import optional_text, require_range, require_text
from careerpath.stores.user_store import UserStore

logger = get_logger(__name__)


def _full_name(value: str | None) -> str:
    return require_text(value, "full_name", min_length=2, max_length=100)


async def create_profile(users: UserStore, *, user_id: str, full_name: str) -> User:
    """Create the profile row for a freshly signed-up user."""
    if not user_id or not user_id.strip():
        raise ValidationError("user_id must not be empty")
    if await users.get(user_id) is not None:
        raise ValidationError(f"Profile for user {user_id} already exists")

    now = utc_now()
    user = User(id=user_id, full_name=_full_name(full_name), created_at=now, updated_at=now)
    await users.insert(user)

    logger.info("Profile created", user_id=user_id)
    return user


async def get_profile(users: UserStore, *, user_id: str) -> User:
    user = await users.get(user_id)
    if user is None:
        raise NotFoundError("Profile", user_id)
    return user


async def update_profile(users: UserStore, *, user_id: str, **changes: Any) -> User:
    """Edit profile fields. Keys left out of ``changes`` keep their current value."""
    fields: dict[str, Any] = {}
    if "full_name" in changes:
        fields["full_name"] = _full_name(changes.pop("full_name"))
    if "bio" in changes:
        fields["bio"] = optional_text(changes.pop("bio"), "bio", max_length=500)
    if "job_title" in changes:
        fields["job_title"] = optional_text(changes.pop("job_title"), "job_title", max_length=100)
    if "education_level" in changes:
        fields["education_level"] = optional_text(
            changes.pop("education_level"), "education_level", max_length=100
        )
    if "experience_years" in changes:
        years = changes.pop("experience_years")
        fields["experience_years"] = (
            None
            if years is None
            else float(require_range(years, "experience_years", minimum=0, maximum=50))
        )
    if changes:
        raise ValidationError(f"Unknown profile fields: {', '.join(sorted(changes))}")

    fields["updated_at"] = utc_now()
    user = await users.update(user_id, fields)
    if user is None:
        raise NotFoundError("Profile", user_id)

    logger.info("Profile updated", user_id=user_id, fields=sorted(fields))
    return user
