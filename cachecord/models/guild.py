from __future__ import annotations

from typing import TYPE_CHECKING

from ..http import cdn
from ..managers.emojis import GuildEmojiManager
from .member import Member
from .role import Role
from .snowflake import Resource, Snowflake

if TYPE_CHECKING:
    from yarl import URL

    from ..client import Client
    from ..types import Guild as GuildP

__all__ = (
    "Guild",
)

class Guild(Resource):
    """A cached guild, the owner of roles, members and emojis.

    Attributes
    ----------
    name : :class:`str`
        The guild name.
    owner_id : :class:`~cachecord.models.Snowflake`, (``Snowflake | None``)
        Id of the guild owner.
    roles : dict[:class:`~cachecord.models.Snowflake`, :class:`~cachecord.models.Role`]
        The cached roles, the ``@everyone`` role shares the guild id.
    members : dict[:class:`~cachecord.models.Snowflake`, :class:`~cachecord.models.Member`]
        The cached members.
    emojis : :class:`~cachecord.managers.GuildEmojiManager`
        The custom emojis of the guild.
    """
    __slots__ = (
        "_client",
        "name",
        "icon",
        "owner_id",
        "unavailable",
        "roles",
        "members",
        "emojis",
    )

    name: str
    icon: str | None
    owner_id: Snowflake | None
    unavailable: bool
    roles: dict[Snowflake, Role]
    members: dict[Snowflake, Member]
    emojis: GuildEmojiManager

    def __init__(self, client: Client, data: GuildP) -> None:
        super().__init__(data["id"])
        self._client = client
        self.name = data.get("name", "")
        self.icon = None
        self.owner_id = None
        self.unavailable = False
        self.roles = {}
        self.members = {}
        self.emojis = GuildEmojiManager(client, self.id)
        self._patch(data)

    def _patch(self, data: GuildP) -> None:
        if "name" in data:
            self.name = data["name"]
        if "icon" in data:
            self.icon = data["icon"]
        if "owner_id" in data:
            self.owner_id = Snowflake(data["owner_id"])
        if "unavailable" in data:
            self.unavailable = data["unavailable"]

        if "roles" in data:
            roles: dict[Snowflake, Role] = {}
            for role_data in data["roles"]:
                role = self.roles.get(Snowflake(role_data["id"]))
                if role is None:
                    role = Role.from_data(role_data, self.id)
                else:
                    role._patch(role_data)
                roles[role.id] = role
            self.roles = roles

        for member_data in data.get("members", ()):
            self._add_member(member_data)

        if "emojis" in data:
            self.emojis._sync(data["emojis"])

    def _add_member(self, data) -> Member:
        member = self.members.get(Snowflake(data["user"]["id"]))
        if member is None:
            member = Member(self._client, data, self)
            self.members[member.id] = member
        else:
            member._patch(data)
        return member

    def _remove_member(self, user_id: int) -> Member | None:
        return self.members.pop(Snowflake(user_id), None)

    @property
    def me(self) -> Member | None:
        """:class:`~cachecord.models.Member`, (``Member | None``): The client's own member record if cached"""
        user = self._client.user
        if user is None:
            return None
        return self.members.get(user.id)

    @property
    def default_role(self) -> Role | None:
        return self.roles.get(self.id)

    @property
    def icon_url(self) -> URL | None:
        if self.icon is None:
            return None
        fmt = cdn.GIF if self.icon.startswith("a_") else cdn.PNG
        return cdn.GUILD_ICON.make_url(fmt, guild_id=self.id, hash=self.icon)

    def get_role(self, role_id: int) -> Role | None:
        return self.roles.get(Snowflake(role_id))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Guild(id={self.id}, name={self.name!r})"
