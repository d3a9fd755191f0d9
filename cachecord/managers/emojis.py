from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from .. import util
from ..models.emoji import GuildEmoji
from ..models.role import Role
from ..models.snowflake import Snowflake
from .base import CachedManager

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ..client import Client
    from ..models.emoji import EmojiLike
    from ..types import Emoji as EmojiP

__all__ = (
    "GuildEmojiManager",
)

logger = getLogger(__name__)

def _role_id(role: Any) -> str:
    if isinstance(role, Role):
        return str(role.id)
    if isinstance(role, int) or (isinstance(role, str) and role.isdigit()):
        return str(Snowflake(role))
    raise TypeError(f"Expected a Role or a snowflake, got {type(role)}")

class GuildEmojiManager(CachedManager[GuildEmoji]):
    """The custom emojis of a guild, available as :attr:`Guild.emojis <cachecord.models.Guild.emojis>`.

    This manager owns the lifetime of the guild's :class:`~cachecord.models.GuildEmoji`
    instances and performs every write request for them.
    """
    holds = GuildEmoji

    def __init__(self, client: Client, guild_id: int) -> None:
        super().__init__(client)
        self.guild_id = Snowflake(guild_id)

    def _construct(self, data: EmojiP) -> GuildEmoji:
        return GuildEmoji(self._client, data, self.guild_id)

    def _same_state(self, old: GuildEmoji, new: GuildEmoji) -> bool:
        return old.equals(new)

    def _require_id(self, emoji: EmojiLike) -> Snowflake:
        emoji_id = self.resolve_id(emoji)
        if emoji_id is None:
            raise TypeError(f"Expected a GuildEmoji or a snowflake, got {type(emoji)}")
        return emoji_id

    async def fetch(
        self, emoji: EmojiLike | None = None, *,
        cache: bool = True, force: bool = False
    ) -> GuildEmoji | dict[Snowflake, GuildEmoji]:
        """Fetch one or all emojis of the guild.

        Parameters
        ----------
        emoji : :class:`~cachecord.models.GuildEmoji`, :class:`int`, :class:`str`
            The emoji to fetch. If :data:`None` every emoji of the guild is fetched
            and the cache is made to match the result. By default :data:`None`.
        cache : :class:`bool`
            Whether to cache the fetched emojis, by default :data:`True`
        force : :class:`bool`
            Whether to skip the cache check for a single emoji, by default :data:`False`

        Returns
        -------
        :class:`~cachecord.models.GuildEmoji`, (``GuildEmoji | dict[Snowflake, GuildEmoji]``)
            The emoji, or a mapping of all emojis by id.
        """
        if emoji is not None:
            emoji_id = self._require_id(emoji)

            if not force:
                existing = self.cache.get(emoji_id)
                if existing is not None:
                    return existing

            data = await self._client.http.get_guild_emoji(self.guild_id, emoji_id)
            return self._add(data, cache=cache)

        payloads = await self._client.http.list_guild_emojis(self.guild_id)

        if cache:
            self._sync(payloads)
            return dict(self.cache)

        return {e.id: e for e in (self._add(d, cache=False) for d in payloads)}

    async def create(
        self, attachment: bytes | str, name: str, *,
        roles: Iterable[Any] | None = None,
        reason: str | None = None
    ) -> GuildEmoji:
        """Create a new emoji in the guild.

        Parameters
        ----------
        attachment : :class:`bytes`, :class:`str`
            The image bytes or a ``data:`` URI of the image.
        name : :class:`str`
            The name of the emoji.
        roles : Iterable[:class:`~cachecord.models.Role`, :class:`int`]
            Roles to restrict the emoji to, by default everyone can use it.
        reason : :class:`str`
            The audit log reason, by default None.

        Raises
        ------
        :exc:`ValueError`
            The image format is not supported.
        :exc:`TypeError`
            ``attachment`` is neither bytes nor a data URI.
        """
        if isinstance(attachment, (bytes, bytearray)):
            image = util.to_data_uri(bytes(attachment))
        elif isinstance(attachment, str) and attachment.startswith("data:"):
            image = attachment
        else:
            raise TypeError("attachment must be image bytes or a data URI")

        role_ids = [_role_id(r) for r in roles] if roles is not None else None

        data = await self._client.http.create_guild_emoji(
            self.guild_id, name=name, image=image, roles=role_ids, reason=reason
        )
        return self._add(data)

    async def edit(self, emoji: EmojiLike, data: Mapping[str, Any], reason: str | None = None) -> GuildEmoji:
        """Edit an emoji of the guild.

        The reply is applied to the cached emoji, which is returned.

        Parameters
        ----------
        emoji : :class:`~cachecord.models.GuildEmoji`, :class:`int`, :class:`str`
            The emoji to edit.
        data : :class:`dict`
            The new ``name`` and/or ``roles`` of the emoji, ``roles`` may be
            :data:`None` to lift the role restriction.
        reason : :class:`str`
            The audit log reason, by default None.
        """
        emoji_id = self._require_id(emoji)

        payload: dict[str, Any] = {}
        if "name" in data:
            payload["name"] = data["name"]
        if "roles" in data:
            roles = data["roles"]
            payload["roles"] = None if roles is None else [_role_id(r) for r in roles]

        new_data = await self._client.http.modify_guild_emoji(
            self.guild_id, emoji_id, payload=payload, reason=reason
        )

        old, emoji = self._update(new_data)
        if old is not None and not old.equals(emoji):
            logger.debug("Emoji %s of guild %s updated", emoji.id, self.guild_id)
        return emoji

    async def delete(self, emoji: EmojiLike, reason: str | None = None) -> None:
        """Delete an emoji of the guild and remove it from the cache.

        Parameters
        ----------
        emoji : :class:`~cachecord.models.GuildEmoji`, :class:`int`, :class:`str`
            The emoji to delete.
        reason : :class:`str`
            The audit log reason, by default None.
        """
        emoji_id = self._require_id(emoji)
        await self._client.http.delete_guild_emoji(self.guild_id, emoji_id, reason=reason)

        if self._remove(emoji_id) is not None:
            logger.debug("Removed deleted emoji %s from guild %s cache", emoji_id, self.guild_id)

    def __repr__(self) -> str:
        return f"GuildEmojiManager(guild_id={self.guild_id}, cached={len(self.cache)})"
