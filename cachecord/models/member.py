from __future__ import annotations

from typing import TYPE_CHECKING

from .permission import Permissions
from .snowflake import GuildResource, Snowflake

if TYPE_CHECKING:
    from ..client import Client
    from ..types import Member as MemberP
    from .guild import Guild
    from .role import Role
    from .user import BaseUser

__all__ = (
    "Member",
)

class Member(GuildResource):
    """A user's membership record of a guild.

    Attributes
    ----------
    nick : :class:`str`, (``str | None``)
        The guild specific nickname.
    role_ids : set[:class:`~cachecord.models.Snowflake`]
        Ids of the roles held, the ``@everyone`` role is implied.
    """
    __slots__ = ("user", "nick", "role_ids", "pending")

    user: BaseUser
    nick: str | None
    role_ids: set[Snowflake]
    pending: bool

    def __init__(self, client: Client, data: MemberP, guild: Guild | int) -> None:
        user = client.users._add(data["user"])
        super().__init__(client, user.id, guild)
        self.user = user
        self.nick = None
        self.role_ids = set()
        self.pending = False
        self._patch(data)

    def _patch(self, data: MemberP) -> None:
        if "nick" in data:
            self.nick = data["nick"]
        if "roles" in data:
            self.role_ids = {Snowflake(r) for r in data["roles"]}
        if "pending" in data:
            self.pending = data["pending"]

    def _clone(self) -> Member:
        clone = super()._clone()
        clone.role_ids = set(self.role_ids)
        return clone

    @property
    def display_name(self) -> str:
        return self.nick or self.user.display_name

    @property
    def roles(self) -> list[Role]:
        """list[:class:`~cachecord.models.Role`]: The cached roles held, ``@everyone`` included, by position"""
        guild_roles = self.guild.roles
        roles = [guild_roles[rid] for rid in self.role_ids | {self.guild_id} if rid in guild_roles]
        roles.sort(key=lambda r: (r.position, r.id))
        return roles

    @property
    def permissions(self) -> Permissions:
        """:class:`~cachecord.models.Permissions`: The guild level permissions of the member.

        The owner and administrators have every permission.
        """
        guild = self.guild
        if guild.owner_id == self.id:
            return Permissions.all()

        value = 0
        for role in self.roles:
            value |= role.permissions

        perms = Permissions(value)
        if perms.administrator:
            return Permissions.all()

        return perms

    def __str__(self) -> str:
        return str(self.user)

    def __repr__(self) -> str:
        return f"Member(id={self.id}, guild_id={self.guild_id}, nick={self.nick!r})"
