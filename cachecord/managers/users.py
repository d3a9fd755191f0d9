from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.user import BaseUser
from .base import CachedManager

if TYPE_CHECKING:
    from ..types import User as UserP

__all__ = (
    "UserManager",
)

class UserManager(CachedManager[BaseUser]):
    """The client wide user cache, available as :attr:`Client.users <cachecord.Client.users>`."""
    holds = BaseUser

    def _construct(self, data: UserP) -> BaseUser:
        return BaseUser.from_data(data)

    async def fetch(self, user: BaseUser | int | str, *, cache: bool = True, force: bool = False) -> BaseUser:
        """Fetch a user, the cached user is returned unless ``force`` is set.

        Raises
        ------
        :exc:`TypeError`
            ``user`` is not a user or a user id.
        :exc:`~cachecord.errors.NotFound`
            The user does not exist.
        """
        user_id = self.resolve_id(user)
        if user_id is None:
            raise TypeError(f"Expected a BaseUser or a snowflake, got {type(user)}")

        if not force:
            existing = self.cache.get(user_id)
            if existing is not None:
                return existing

        data = await self._client.http.get_user(user_id)
        return self._add(data, cache=cache)
