from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..models.role import Role
from ..models.snowflake import Snowflake

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..models.emoji import GuildEmoji
    from ..models.guild import Guild

__all__ = (
    "GuildEmojiRoleManager",
)

RoleLike = Any # Role | int | str

class GuildEmojiRoleManager:
    """The roles a :class:`~cachecord.models.GuildEmoji` is restricted to.

    This is a view over :attr:`GuildEmoji.role_ids <cachecord.models.GuildEmoji.role_ids>`,
    changes are made through :meth:`GuildEmoji.edit <cachecord.models.GuildEmoji.edit>`.
    """
    __slots__ = ("emoji",)

    def __init__(self, emoji: GuildEmoji) -> None:
        self.emoji = emoji

    @property
    def guild(self) -> Guild:
        return self.emoji.guild

    @property
    def cache(self) -> dict[Snowflake, Role]:
        """dict[:class:`~cachecord.models.Snowflake`, :class:`~cachecord.models.Role`]: The cached roles, unknown ids are left out"""
        roles = self.guild.roles
        return {rid: roles[rid] for rid in self.emoji.role_ids if rid in roles}

    @staticmethod
    def _resolve_ids(roles: Iterable[RoleLike]) -> set[Snowflake]:
        ids: set[Snowflake] = set()
        for role in roles:
            if isinstance(role, Role):
                ids.add(role.id)
            elif isinstance(role, int) or (isinstance(role, str) and role.isdigit()):
                ids.add(Snowflake(role))
            else:
                raise TypeError(f"Expected a Role or a snowflake, got {type(role)}")
        return ids

    async def add(self, *roles: RoleLike) -> GuildEmoji:
        """Allow ``roles`` to use the emoji."""
        return await self.set(self.emoji.role_ids | self._resolve_ids(roles))

    async def remove(self, *roles: RoleLike) -> GuildEmoji:
        """Disallow ``roles`` from using the emoji."""
        return await self.set(self.emoji.role_ids - self._resolve_ids(roles))

    async def set(self, roles: Iterable[RoleLike]) -> GuildEmoji:
        """Replace the roles allowed to use the emoji, an empty iterable lifts the restriction."""
        return await self.emoji.edit({"roles": sorted(self._resolve_ids(roles))})

    def __len__(self) -> int:
        return len(self.emoji.role_ids)

    def __iter__(self) -> Iterator[Role]:
        return iter(self.cache.values())

    def __contains__(self, role: RoleLike) -> bool:
        try:
            ids = self._resolve_ids((role,))
        except TypeError:
            return False
        return ids <= self.emoji.role_ids
