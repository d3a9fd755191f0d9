from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, Any, Union

from ..errors import EmojiManaged, GuildMemberStateMissing, MissingPermissions
from ..http import cdn
from .snowflake import GuildResource, Snowflake

if TYPE_CHECKING:
    from yarl import URL

    from ..client import Client
    from ..managers.emoji_roles import GuildEmojiRoleManager
    from ..types import EditEmoji
    from ..types import Emoji as EmojiP
    from .guild import Guild
    from .member import Member
    from .user import BaseUser

__all__ = (
    "GuildEmoji",
)

logger = getLogger(__name__)

class GuildEmoji(GuildResource):
    """A custom emoji of a guild.

    The emoji is a cached projection of the server state. It is
    created from a payload, patched in place when fresher payloads
    arrive and cloned when a snapshot of its state is needed.
    Writes are forwarded to :attr:`Guild.emojis <cachecord.models.Guild.emojis>`.

    Two emojis compare equal with ``==`` when their ids match,
    use :meth:`equals` for a comparison of their state.

    Attributes
    ----------
    name : :class:`str`
        The name of the emoji.
    managed : :class:`bool`
        Whether the emoji is managed by an integration.
    available : :class:`bool`
        Whether the emoji can be used, may be :data:`False` due to loss of server boosts.
    require_colons : :class:`bool`
        Whether the emoji must be wrapped in colons to be used.
    animated : :class:`bool`
        Whether the emoji is animated.
    author : :class:`~cachecord.models.BaseUser`, (``BaseUser | None``)
        The user who created the emoji. Only known after :meth:`fetch_author`
        or when a payload carried it.
    role_ids : set[:class:`~cachecord.models.Snowflake`]
        Ids of the roles allowed to use the emoji, empty if everyone can use it.
    """
    __slots__ = (
        "name",
        "managed",
        "available",
        "require_colons",
        "animated",
        "author",
        "role_ids",
    )

    name: str | None
    managed: bool | None
    available: bool | None
    require_colons: bool | None
    animated: bool | None
    author: BaseUser | None
    role_ids: set[Snowflake]

    def __init__(self, client: Client, data: EmojiP, guild: Guild | int) -> None:
        super().__init__(client, data["id"], guild)
        self.name = None
        self.managed = None
        self.available = None
        self.require_colons = None
        self.animated = None
        self.author = None
        self.role_ids = set()
        self._patch(data)

    def _patch(self, data: EmojiP) -> None:
        if "name" in data:
            self.name = data["name"]
        if "managed" in data:
            self.managed = data["managed"]
        if "available" in data:
            self.available = data["available"]
        if "require_colons" in data:
            self.require_colons = data["require_colons"]
        if "animated" in data:
            self.animated = data["animated"]
        if "roles" in data:
            self.role_ids = {Snowflake(r) for r in data["roles"]}
        if data.get("user") is not None:
            self.author = self._client.users._add(data["user"])

    def _clone(self) -> GuildEmoji:
        clone = super()._clone()
        clone.role_ids = set(self.role_ids)
        return clone

    def _require_me(self) -> tuple[Guild, Member]:
        guild = self.guild
        me = guild.me
        if me is None:
            raise GuildMemberStateMissing(guild.id)
        return guild, me

    @property
    def deletable(self) -> bool:
        """:class:`bool`: Whether the client can delete this emoji.

        Raises
        ------
        :exc:`~cachecord.errors.GuildMemberStateMissing`
            The client's member record of the guild is not cached.
        """
        _, me = self._require_me()
        return not self.managed and me.permissions.manage_emojis

    @property
    def roles(self) -> GuildEmojiRoleManager:
        """:class:`~cachecord.managers.GuildEmojiRoleManager`: The roles this emoji is restricted to"""
        from ..managers.emoji_roles import GuildEmojiRoleManager

        return GuildEmojiRoleManager(self)

    @property
    def url(self) -> URL:
        """:class:`yarl.URL`: The CDN url of the emoji image"""
        return cdn.EMOJI.make_url(cdn.GIF if self.animated else cdn.PNG, id=self.id)

    @property
    def identifier(self) -> str:
        """:class:`str`: The form used for reactions, ``name:id``"""
        return f"{'a:' if self.animated else ''}{self.name}:{self.id}"

    async def fetch_author(self) -> BaseUser | None:
        """Fetch the user who created this emoji.

        All checks are done before the request is made.

        Returns
        -------
        :class:`~cachecord.models.BaseUser`, (``BaseUser | None``)
            The author, :data:`None` if the API did not send it.

        Raises
        ------
        :exc:`~cachecord.errors.EmojiManaged`
            The emoji is managed by an integration.
        :exc:`~cachecord.errors.GuildMemberStateMissing`
            The client's member record of the guild is not cached.
        :exc:`~cachecord.errors.MissingPermissions`
            The client can't manage emojis of the guild.
        """
        if self.managed:
            raise EmojiManaged(self.id)

        guild, me = self._require_me()
        if not me.permissions.manage_emojis:
            logger.debug("Refusing author fetch of emoji %s, missing permission in guild %s", self.id, guild.id)
            raise MissingPermissions("manage_emojis_and_stickers", guild)

        data = await self._client.http.get_guild_emoji(self.guild_id, self.id)
        self._patch(data)
        return self.author

    async def edit(self, data: EditEmoji | dict[str, Any], reason: str | None = None) -> GuildEmoji:
        """Edit the emoji.

        Parameters
        ----------
        data : :class:`dict`
            The new ``name`` and/or ``roles`` (roles or role ids) of the emoji.
        reason : :class:`str`
            The audit log reason, by default None.

        Returns
        -------
        :class:`GuildEmoji`
            The updated emoji.
        """
        return await self.guild.emojis.edit(self.id, data, reason)

    async def set_name(self, name: str, reason: str | None = None) -> GuildEmoji:
        return await self.edit({"name": name}, reason)

    async def delete(self, reason: str | None = None) -> GuildEmoji:
        """Delete the emoji.

        The returned emoji is this same object, it is not invalidated.
        """
        await self.guild.emojis.delete(self.id, reason)
        return self

    def equals(self, other: GuildEmoji | Mapping[str, Any]) -> bool:
        """Whether ``other`` describes the same emoji state.

        ``other`` may be another :class:`GuildEmoji` or a raw emoji payload.
        For a payload only the id, name and roles are compared.
        """
        if isinstance(other, GuildEmoji):
            return (
                other.id == self.id
                and other.name == self.name
                and other.managed == self.managed
                and other.available == self.available
                and other.require_colons == self.require_colons
                and other.role_ids == self.role_ids
            )

        if not isinstance(other, Mapping):
            return False

        roles = other.get("roles") or ()
        try:
            if Snowflake(other["id"]) != self.id:
                return False
            role_ids = [Snowflake(r) for r in roles]
        except (KeyError, TypeError, ValueError):
            # not a valid emoji payload
            return False

        return (
            other.get("name") == self.name
            and len(role_ids) == len(self.role_ids)
            and all(r in self.role_ids for r in role_ids)
        )

    def __str__(self) -> str:
        return f"<{'a' if self.animated else ''}:{self.name}:{self.id}>"

    def __repr__(self) -> str:
        return f"GuildEmoji(id={self.id}, name={self.name!r}, guild_id={self.guild_id}, managed={self.managed})"

EmojiLike = Union[GuildEmoji, int, str]
