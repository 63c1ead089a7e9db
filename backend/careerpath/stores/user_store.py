"""User profile store."""

from typing import Any

from careerpath.models.user import User
from careerpath.stores.base import BaseStore


class UserStore(BaseStore):
    async def get(self, user_id: str) -> User | None:
        with self.translate_errors("users.get"):
            return await self.db.get(User, user_id)

    async def insert(self, user: User) -> User:
        with self.translate_errors("users.insert"):
            self.db.add(user)
            await self.db.flush()
        return user

    async def update(self, user_id: str, fields: dict[str, Any]) -> User | None:
        user = await self.get(user_id)
        if user is None:
            return None

        with self.translate_errors("users.update"):
            for name, value in fields.items():
                setattr(user, name, value)
            await self.db.flush()
        return user
