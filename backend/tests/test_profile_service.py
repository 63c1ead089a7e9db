"""Tests for profile_service."""

import pytest

from careerpath.core.exceptions import NotFoundError, ValidationError
from careerpath.services import profile_service
from careerpath.stores import UserStore


@pytest.mark.asyncio
async def test_create_and_get_profile(users: UserStore) -> None:
    created = await profile_service.create_profile(users, user_id="u1", full_name="Ada Lovelace")
    assert created.id == "u1"
    assert created.full_name == "Ada Lovelace"

    fetched = await profile_service.get_profile(users, user_id="u1")
    assert fetched.full_name == "Ada Lovelace"


@pytest.mark.asyncio
async def test_create_profile_twice(users: UserStore) -> None:
    await profile_service.create_profile(users, user_id="u1", full_name="Ada Lovelace")
    with pytest.raises(ValidationError, match="already exists"):
        await profile_service.create_profile(users, user_id="u1", full_name="Ada L.")


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id,full_name", [("", "Ada"), ("u1", "A"), ("u1", " ")])
async def test_create_profile_validation(users: UserStore, user_id: str, full_name: str) -> None:
    with pytest.raises(ValidationError):
        await profile_service.create_profile(users, user_id=user_id, full_name=full_name)


@pytest.mark.asyncio
async def test_update_profile(users: UserStore) -> None:
    await profile_service.create_profile(users, user_id="u1", full_name="Ada Lovelace")

    updated = await profile_service.update_profile(
        users, user_id="u1", job_title="Analyst", experience_years=3, bio=""
    )

    assert updated.job_title == "Analyst"
    assert updated.experience_years == 3
    assert updated.bio is None
    assert updated.full_name == "Ada Lovelace"

    with pytest.raises(ValidationError):
        await profile_service.update_profile(users, user_id="u1", experience_years=60)


@pytest.mark.asyncio
async def test_missing_profile(users: UserStore) -> None:
    with pytest.raises(NotFoundError):
        await profile_service.get_profile(users, user_id="nobody")
    with pytest.raises(NotFoundError):
        await profile_service.update_profile(users, user_id="nobody", job_title="Analyst")
